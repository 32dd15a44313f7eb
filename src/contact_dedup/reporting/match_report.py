"""
Match report rendering for ContactDedup.

Formats match results as a fixed-width console table with localized
precision labels and computes summary statistics over the results.
"""

import logging
from typing import Dict, List, Sequence

import pandas as pd

from ..match.models import MatchResult, PrecisionTier

logger = logging.getLogger(__name__)

TIER_LABELS: Dict[str, Dict[PrecisionTier, str]] = {
    "es": {
        PrecisionTier.HIGH: "Alta",
        PrecisionTier.MEDIUM: "Media",
        PrecisionTier.LOW: "Baja",
    },
    "en": {
        PrecisionTier.HIGH: "High",
        PrecisionTier.MEDIUM: "Medium",
        PrecisionTier.LOW: "Low",
    },
}

REPORT_HEADERS = {
    "es": "ContactID Origen | ContactID Coincidencia | Precisión",
    "en": "Origin ContactID | Matched ContactID | Precision",
}

ORIGIN_WIDTH = 17
MATCH_WIDTH = 25


def tier_label(tier: PrecisionTier, locale: str = "es") -> str:
    """Localized display label for a precision tier."""
    return TIER_LABELS[locale][tier]


class MatchReport:
    """
    Renders match results for the console.

    Each result becomes one line: origin id padded to 17 columns, matched
    id padded to 25 columns, then the tier label.
    """

    def __init__(self, locale: str = "es"):
        if locale not in TIER_LABELS:
            raise ValueError(f"Unsupported report locale: {locale}")
        self.locale = locale

    @property
    def header(self) -> str:
        return REPORT_HEADERS[self.locale]

    def format_result(self, result: MatchResult) -> str:
        origin = f"{result.origin_id:<{ORIGIN_WIDTH}d}"
        match = f"{result.matched_id:<{MATCH_WIDTH}d}"
        return f"{origin}{match}{tier_label(result.precision_tier, self.locale)}"

    def format_lines(self, results: Sequence[MatchResult]) -> List[str]:
        """
        Render the header and one line per result.

        Args:
            results: Ordered match results

        Returns:
            Report lines, header first
        """
        return [self.header] + [self.format_result(result) for result in results]

    def to_dataframe(self, results: Sequence[MatchResult]) -> pd.DataFrame:
        """
        Tabulate results with localized labels.

        Args:
            results: Ordered match results

        Returns:
            DataFrame with origin_id, matched_id, tier and label columns
        """
        return pd.DataFrame(
            [
                {
                    "origin_id": result.origin_id,
                    "matched_id": result.matched_id,
                    "tier": result.precision_tier.name,
                    "label": tier_label(result.precision_tier, self.locale),
                }
                for result in results
            ],
            columns=["origin_id", "matched_id", "tier", "label"],
        )

    def get_statistics(self, results: Sequence[MatchResult], contact_count: int) -> Dict[str, any]:
        """
        Calculate summary statistics for a run.

        Args:
            results: Match results
            contact_count: Number of contacts that were compared

        Returns:
            Dictionary with pair counts and tier distribution
        """
        results_df = self.to_dataframe(results)
        evaluated_pairs = contact_count * (contact_count - 1) // 2

        tier_counts = results_df["tier"].value_counts().to_dict()
        tier_distribution = {tier.name: int(tier_counts.get(tier.name, 0)) for tier in PrecisionTier}

        flagged_ids = pd.concat([results_df["origin_id"], results_df["matched_id"]]).unique()

        return {
            "total_contacts": contact_count,
            "evaluated_pairs": evaluated_pairs,
            "total_matches": len(results_df),
            "match_rate": len(results_df) / evaluated_pairs if evaluated_pairs else 0.0,
            "tier_distribution": tier_distribution,
            "contacts_flagged": len(flagged_ids),
        }

    def log_report(self, results: Sequence[MatchResult]):
        """Emit the report through the module logger, one line per result."""
        for line in self.format_lines(results):
            logger.info(line)
