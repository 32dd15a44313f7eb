"""
Matching engine for ContactDedup.

Implements field similarity, weighted composite scoring and precision
tier classification for pairwise contact duplicate detection.
"""

from .models import ContactRecord, MatchResult, PairScore, PrecisionTier
from .classifier import classify
from .scorer import CompositeScorer
from .engine import MatchEngine, find_matches

__all__ = [
    "ContactRecord",
    "MatchResult",
    "PairScore",
    "PrecisionTier",
    "classify",
    "CompositeScorer",
    "MatchEngine",
    "find_matches",
]
