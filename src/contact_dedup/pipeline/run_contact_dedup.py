"""
Main pipeline orchestrator for ContactDedup.

Coordinates the duplicate detection pipeline from spreadsheet ingestion
through pairwise matching to console reporting.
"""

import argparse
import logging
import sys
import time
from typing import Dict, List, Optional

from ..config import DEFAULT_CONFIG_PATH, LOG_LEVELS, load_config, validate_config
from ..exceptions import ConfigError
from ..ingestion.contact_reader import ContactReader
from ..match.engine import MatchEngine
from ..match.models import ContactRecord, MatchResult
from ..reporting.match_report import MatchReport

logger = logging.getLogger(__name__)


class ContactDedupPipeline:
    """
    Main pipeline orchestrator for ContactDedup.

    Runs ingestion, matching and reporting in order, timing each stage.
    """

    def __init__(self, config_path: str = DEFAULT_CONFIG_PATH, config: Optional[Dict] = None):
        """
        Initialize pipeline with configuration.

        Args:
            config_path: Path to configuration file
            config: Already-loaded configuration (takes precedence over config_path)
        """
        self.config_path = config_path
        self.config = config if config is not None else load_config(config_path)

        if not validate_config(self.config):
            raise ConfigError(f"Invalid configuration: {config_path}")

        input_config = self.config["input"]
        reporting_config = self.config["reporting"]

        self.reader = ContactReader(sheet=input_config.get("sheet", 0))
        self.engine = MatchEngine(max_workers=self.config["processing"].get("max_workers", 1))
        self.report = MatchReport(locale=reporting_config.get("locale", "es"))

        self.stage_times = {}

        logger.info("Initialized ContactDedup pipeline")

    def _start_stage_timer(self, stage_name: str):
        """Start timing for a pipeline stage."""
        self.stage_times[stage_name] = time.time()
        logger.info(f"Starting stage: {stage_name}")

    def _end_stage_timer(self, stage_name: str):
        """End timing for a pipeline stage."""
        if stage_name in self.stage_times:
            duration = time.time() - self.stage_times[stage_name]
            self.stage_times[stage_name] = duration
            logger.info(f"Completed stage: {stage_name} in {duration:.2f} seconds")

    def ingest_contacts(self, input_path: str) -> List[ContactRecord]:
        """
        Read contacts from the source spreadsheet.

        Args:
            input_path: Path to the spreadsheet

        Returns:
            List of contact records
        """
        self._start_stage_timer("contact_ingestion")

        try:
            contacts = self.reader.read_contacts(input_path)
        except Exception as e:
            logger.error(f"Contact ingestion failed: {e}")
            raise

        self._end_stage_timer("contact_ingestion")
        return contacts

    def match_contacts(self, contacts: List[ContactRecord]) -> List[MatchResult]:
        """
        Find duplicate pairs among contacts.

        Args:
            contacts: Contact records in input order

        Returns:
            Ordered match results
        """
        self._start_stage_timer("contact_matching")

        try:
            results = self.engine.find_matches(contacts)
        except Exception as e:
            logger.error(f"Contact matching failed: {e}")
            raise

        self._end_stage_timer("contact_matching")
        return results

    def report_matches(self, results: List[MatchResult], contact_count: int) -> Dict[str, any]:
        """
        Log the match table and compute run statistics.

        Args:
            results: Ordered match results
            contact_count: Number of contacts compared

        Returns:
            Statistics dictionary
        """
        self._start_stage_timer("reporting")

        self.report.log_report(results)
        statistics = self.report.get_statistics(results, contact_count)

        if self.config["reporting"].get("show_statistics", False):
            logger.info(f"Evaluated {statistics['evaluated_pairs']} pairs, "
                        f"{statistics['total_matches']} matches: {statistics['tier_distribution']}")

        self._end_stage_timer("reporting")
        return statistics

    def run_pipeline(self, input_path: Optional[str] = None) -> Dict[str, any]:
        """
        Run the complete ContactDedup pipeline.

        Args:
            input_path: Path to the spreadsheet (defaults to input.path from config)

        Returns:
            Run report with results, statistics and stage timings
        """
        input_path = input_path or self.config["input"]["path"]
        pipeline_start_time = time.time()
        logger.info(f"Starting ContactDedup pipeline for {input_path}")

        contacts = self.ingest_contacts(input_path)
        results = self.match_contacts(contacts)
        statistics = self.report_matches(results, len(contacts))

        total_duration = time.time() - pipeline_start_time
        logger.info(f"Pipeline completed successfully in {total_duration:.2f} seconds")

        return {
            "input_path": input_path,
            "results": results,
            "statistics": statistics,
            "stage_times": dict(self.stage_times),
            "total_duration": total_duration,
        }


def main(argv: Optional[List[str]] = None):
    """Main entry point for the ContactDedup pipeline."""
    parser = argparse.ArgumentParser(description="ContactDedup duplicate contact detection")
    parser.add_argument("--input", help="Input spreadsheet path (.xlsx, .xls or .csv)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Configuration file path")
    parser.add_argument("--workers", type=int, help="Worker threads for pair evaluation")
    parser.add_argument("--locale", choices=["es", "en"], help="Report label language")
    parser.add_argument("--log-level", choices=list(LOG_LEVELS))

    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.workers is not None:
        config["processing"]["max_workers"] = args.workers
    if args.locale:
        config["reporting"]["locale"] = args.locale

    log_level = args.log_level or config.get("logging", {}).get("level", "INFO")
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        pipeline = ContactDedupPipeline(args.config, config=config)
        pipeline.run_pipeline(args.input)
    except Exception as e:
        logger.error(f"Pipeline execution failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
