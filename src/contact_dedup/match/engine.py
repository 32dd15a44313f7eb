"""
Pairwise match engine for ContactDedup.

Enumerates every unique unordered pair of contacts, scores each pair with
the composite scorer and keeps the pairs that reach the acceptance
threshold, classified into precision tiers.

Every pair is evaluated, so the cost is O(n^2) in the number of contacts.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from .classifier import classify
from .models import ContactRecord, MatchResult
from .scorer import CompositeScorer

logger = logging.getLogger(__name__)

ACCEPTANCE_THRESHOLD = 0.5


class MatchEngine:
    """
    Finds likely-duplicate contacts by all-pairs comparison.

    Results are always returned in (i, j) enumeration order of the input,
    with i < j. With ``max_workers > 1`` each row of the pair triangle (all
    pairs sharing an origin i) is scored on a thread pool and the rows are
    put back in order before returning, so the output is the same as the
    sequential scan.
    """

    def __init__(self, scorer: Optional[CompositeScorer] = None, max_workers: int = 1):
        """
        Initialize match engine.

        Args:
            scorer: Composite scorer (a default one is created if omitted)
            max_workers: Number of worker threads for pair evaluation
        """
        self.scorer = scorer or CompositeScorer()
        self.max_workers = max(1, max_workers)

        logger.info(f"Initialized MatchEngine with {self.max_workers} worker(s)")

    @staticmethod
    def pair_count(n: int) -> int:
        """Number of unique unordered pairs among n contacts."""
        return n * (n - 1) // 2

    @staticmethod
    def iter_pairs(contacts: Sequence[ContactRecord]) -> Iterator[Tuple[int, int]]:
        """Yield index pairs (i, j), i < j, in enumeration order."""
        for i in range(len(contacts)):
            for j in range(i + 1, len(contacts)):
                yield i, j

    def evaluate_pair(self, contact1: ContactRecord,
                      contact2: ContactRecord) -> Optional[MatchResult]:
        """
        Score and classify a single pair.

        Returns:
            MatchResult if the pair reaches the acceptance threshold, else None
        """
        total_score = self.scorer.total_score(contact1, contact2)
        if total_score < ACCEPTANCE_THRESHOLD:
            return None

        return MatchResult(
            origin_id=contact1.contact_id,
            matched_id=contact2.contact_id,
            precision_tier=classify(total_score),
        )

    def _match_row(self, contacts: Sequence[ContactRecord], i: int) -> List[MatchResult]:
        """Evaluate all pairs whose origin is contact i."""
        results = []
        origin = contacts[i]
        for j in range(i + 1, len(contacts)):
            result = self.evaluate_pair(origin, contacts[j])
            if result is not None:
                results.append(result)
        return results

    def find_matches(self, contacts: Sequence[ContactRecord]) -> List[MatchResult]:
        """
        Find all qualifying duplicate pairs.

        Args:
            contacts: Contacts in input order; never modified

        Returns:
            Match results ordered by (origin index, match index)
        """
        contacts = list(contacts)
        n = len(contacts)
        logger.info(f"Evaluating {self.pair_count(n)} pairs across {n} contacts")

        if self.max_workers == 1 or n < 3:
            results = []
            for i in range(n):
                results.extend(self._match_row(contacts, i))
        else:
            results = self._find_matches_parallel(contacts)

        logger.info(f"Found {len(results)} matches")
        return results

    def _find_matches_parallel(self, contacts: List[ContactRecord]) -> List[MatchResult]:
        rows: Dict[int, List[MatchResult]] = {}

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            future_to_row = {
                executor.submit(self._match_row, contacts, i): i
                for i in range(len(contacts) - 1)
            }

            for future in as_completed(future_to_row):
                rows[future_to_row[future]] = future.result()

        results = []
        for i in sorted(rows):
            results.extend(rows[i])
        return results


def find_matches(contacts: Sequence[ContactRecord], max_workers: int = 1) -> List[MatchResult]:
    """
    Convenience function to run the match engine over a list of contacts.

    Args:
        contacts: Contacts in input order
        max_workers: Number of worker threads for pair evaluation

    Returns:
        Ordered list of match results
    """
    engine = MatchEngine(max_workers=max_workers)
    return engine.find_matches(contacts)
