"""
Field-level similarity functions for ContactDedup.

Two comparison modes are supported: exact match (email, postal code) and
normalized Levenshtein similarity (name, address). All functions return a
score in [0, 1].
"""

from Levenshtein import distance as levenshtein_distance


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def exact_similarity(value1: str, value2: str, case_sensitive: bool = True) -> float:
    """
    Exact-match similarity.

    Args:
        value1: First field value
        value2: Second field value
        case_sensitive: Compare exactly when True, case-insensitively otherwise

    Returns:
        1.0 if both values are present and equal, 0.0 otherwise
    """
    if _is_blank(value1) or _is_blank(value2):
        return 0.0

    if not case_sensitive:
        value1 = value1.lower()
        value2 = value2.lower()

    return 1.0 if value1 == value2 else 0.0


def edit_distance(value1: str, value2: str) -> int:
    """Case-insensitive Levenshtein distance between two strings."""
    return levenshtein_distance(value1.lower(), value2.lower())


def edit_similarity(value1: str, value2: str) -> float:
    """
    Normalized edit-distance similarity.

    Computed as ``1 - distance / max(len(value1), len(value2))``, so
    "john smith" vs "jon smith" scores 0.9 and "main street" vs "main st"
    scores 1 - 4/11. Two empty strings are treated as identical.

    Args:
        value1: First string
        value2: Second string

    Returns:
        Similarity between 0.0 (nothing in common) and 1.0 (identical)
    """
    value1 = value1.lower()
    value2 = value2.lower()

    # Lengths come from the lowercased text; lowercasing can add code points
    max_length = max(len(value1), len(value2))
    if max_length == 0:
        return 1.0

    return 1.0 - levenshtein_distance(value1, value2) / max_length
