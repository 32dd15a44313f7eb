"""
Domain models for ContactDedup matching.

Contacts and match results are immutable value records; the engine reads
contacts and emits results but never mutates either.
"""

from dataclasses import dataclass
from enum import Enum


class PrecisionTier(Enum):
    """Confidence bucket assigned to a qualifying match."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


@dataclass(frozen=True)
class ContactRecord:
    """
    A contact entry parsed from the source spreadsheet.

    ``source_position`` is the 1-based spreadsheet row the record came from.
    It is kept for traceability only and plays no part in scoring.
    """

    contact_id: int
    given_name: str = ""
    surname: str = ""
    email: str = ""
    postal_code: str = ""
    address: str = ""
    source_position: int = 0

    @property
    def full_name(self) -> str:
        return f"{self.given_name} {self.surname}"


@dataclass(frozen=True)
class MatchResult:
    """A pair of contact ids judged to be likely duplicates."""

    origin_id: int
    matched_id: int
    precision_tier: PrecisionTier


@dataclass(frozen=True)
class PairScore:
    """Per-field similarity breakdown for a pair of contacts."""

    name_score: float
    email_score: float
    zip_score: float
    address_score: float
    total_score: float
