"""
ContactDedup - Duplicate Contact Detection Engine

Flags likely-duplicate contact records in a spreadsheet by scoring every
unique pair on weighted field similarity and classifying matches into
precision tiers.
"""

__version__ = "1.0.0"
__author__ = "ContactDedup Team"
