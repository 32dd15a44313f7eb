"""
Unit tests for match reporting.
"""

import logging
import pytest
import sys
from pathlib import Path

# Add src to path
sys.path.append(str(Path(__file__).parent.parent / "src"))

from contact_dedup.match.models import MatchResult, PrecisionTier
from contact_dedup.reporting.match_report import MatchReport, tier_label


class TestMatchReport:
    """Test cases for the console match report."""

    def setup_method(self):
        """Setup test fixtures."""
        self.report = MatchReport()
        self.results = [
            MatchResult(1, 2, PrecisionTier.HIGH),
            MatchResult(1, 3, PrecisionTier.MEDIUM),
            MatchResult(21, 22, PrecisionTier.LOW),
        ]

    def test_tier_labels(self):
        """Test localized tier labels."""
        assert tier_label(PrecisionTier.HIGH) == "Alta"
        assert tier_label(PrecisionTier.MEDIUM) == "Media"
        assert tier_label(PrecisionTier.LOW) == "Baja"
        assert tier_label(PrecisionTier.HIGH, "en") == "High"

    def test_format_lines(self):
        """Test header and fixed-width result lines."""
        lines = self.report.format_lines(self.results)

        assert lines[0] == "ContactID Origen | ContactID Coincidencia | Precisión"
        assert lines[1] == "1" + " " * 16 + "2" + " " * 24 + "Alta"
        assert lines[2] == f"{'1':<17}{'3':<25}Media"
        assert lines[3] == f"{'21':<17}{'22':<25}Baja"

    def test_format_lines_empty(self):
        """Test that an empty result set still renders the header."""
        assert self.report.format_lines([]) == [self.report.header]

    def test_english_locale(self):
        """Test the English report variant."""
        report = MatchReport(locale="en")
        lines = report.format_lines(self.results[:1])
        assert lines[0] == "Origin ContactID | Matched ContactID | Precision"
        assert lines[1].endswith("High")

    def test_unsupported_locale(self):
        """Test that unknown locales are rejected."""
        with pytest.raises(ValueError):
            MatchReport(locale="fr")

    def test_to_dataframe(self):
        """Test tabular export of results."""
        df = self.report.to_dataframe(self.results)
        assert list(df.columns) == ["origin_id", "matched_id", "tier", "label"]
        assert df["tier"].tolist() == ["HIGH", "MEDIUM", "LOW"]
        assert df["label"].tolist() == ["Alta", "Media", "Baja"]

    def test_get_statistics(self):
        """Test run statistics."""
        stats = self.report.get_statistics(self.results, contact_count=5)

        assert stats["total_contacts"] == 5
        assert stats["evaluated_pairs"] == 10
        assert stats["total_matches"] == 3
        assert stats["match_rate"] == pytest.approx(0.3)
        assert stats["tier_distribution"] == {"HIGH": 1, "MEDIUM": 1, "LOW": 1}
        assert stats["contacts_flagged"] == 5

    def test_get_statistics_empty(self):
        """Test statistics with no contacts and no matches."""
        stats = self.report.get_statistics([], contact_count=0)

        assert stats["evaluated_pairs"] == 0
        assert stats["total_matches"] == 0
        assert stats["match_rate"] == 0.0
        assert stats["tier_distribution"] == {"HIGH": 0, "MEDIUM": 0, "LOW": 0}
        assert stats["contacts_flagged"] == 0

    def test_log_report(self, caplog):
        """Test that the report is written to the log."""
        with caplog.at_level(logging.INFO, logger="contact_dedup.reporting.match_report"):
            self.report.log_report(self.results)

        messages = [record.getMessage() for record in caplog.records]
        assert messages == self.report.format_lines(self.results)


if __name__ == "__main__":
    pytest.main([__file__])
