"""
Weighted composite scorer for ContactDedup.

Combines per-field similarities (name, email, postal code, address) into a
single weighted score for a pair of contacts.
"""

import logging
from typing import Dict

from .field_similarity import edit_similarity, exact_similarity
from .models import ContactRecord, PairScore

logger = logging.getLogger(__name__)

# Weights sum to 1.0, which keeps the total score within [0, 1]
FIELD_WEIGHTS: Dict[str, float] = {
    "email": 0.6,
    "name": 0.2,
    "zip": 0.1,
    "address": 0.1,
}


class CompositeScorer:
    """
    Scores a pair of contacts on weighted field similarity.

    Email and postal code are compared exactly, name and address by
    normalized edit distance. Email carries most of the weight, so two
    records without a shared email can never reach the acceptance threshold.
    """

    def __init__(self):
        self.weights = dict(FIELD_WEIGHTS)
        logger.debug(f"Initialized CompositeScorer with weights {self.weights}")

    def calculate_name_similarity(self, contact1: ContactRecord, contact2: ContactRecord) -> float:
        """
        Edit similarity of the lowercased "given surname" strings.

        Always computed, so two contacts with no name at all score 1.0 here.
        """
        return edit_similarity(contact1.full_name.lower(), contact2.full_name.lower())

    def calculate_email_similarity(self, contact1: ContactRecord, contact2: ContactRecord) -> float:
        return exact_similarity(contact1.email, contact2.email, case_sensitive=False)

    def calculate_zip_similarity(self, contact1: ContactRecord, contact2: ContactRecord) -> float:
        return exact_similarity(contact1.postal_code, contact2.postal_code)

    def calculate_address_similarity(self, contact1: ContactRecord, contact2: ContactRecord) -> float:
        """
        Edit similarity of the lowercased addresses.

        Returns 0.0 when either address is missing.
        """
        if not contact1.address.strip() or not contact2.address.strip():
            return 0.0

        return edit_similarity(contact1.address.lower(), contact2.address.lower())

    def score_pair(self, contact1: ContactRecord, contact2: ContactRecord) -> PairScore:
        """
        Calculate the full similarity breakdown for two contacts.

        Args:
            contact1: Origin contact (earlier in input order)
            contact2: Candidate contact

        Returns:
            PairScore with per-field scores and the weighted total
        """
        name_score = self.calculate_name_similarity(contact1, contact2)
        email_score = self.calculate_email_similarity(contact1, contact2)
        zip_score = self.calculate_zip_similarity(contact1, contact2)
        address_score = self.calculate_address_similarity(contact1, contact2)

        total_score = (
            self.weights["email"] * email_score +
            self.weights["name"] * name_score +
            self.weights["zip"] * zip_score +
            self.weights["address"] * address_score
        )

        return PairScore(
            name_score=name_score,
            email_score=email_score,
            zip_score=zip_score,
            address_score=address_score,
            total_score=total_score,
        )

    def total_score(self, contact1: ContactRecord, contact2: ContactRecord) -> float:
        """Weighted total score for two contacts."""
        return self.score_pair(contact1, contact2).total_score
