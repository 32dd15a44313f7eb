"""
Precision tier classification for ContactDedup.
"""

from .models import PrecisionTier

HIGH_THRESHOLD = 0.85
MEDIUM_THRESHOLD = 0.70


def classify(score: float) -> PrecisionTier:
    """
    Map a composite score to a precision tier.

    Lower bounds are inclusive: 0.85 is HIGH and 0.70 is MEDIUM. Anything
    below 0.70 is LOW; the engine only classifies scores that already passed
    its acceptance threshold.

    Args:
        score: Composite similarity score

    Returns:
        PrecisionTier for the score
    """
    if score >= HIGH_THRESHOLD:
        return PrecisionTier.HIGH
    elif score >= MEDIUM_THRESHOLD:
        return PrecisionTier.MEDIUM
    else:
        return PrecisionTier.LOW
