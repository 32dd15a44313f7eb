"""
Data ingestion for ContactDedup.

Reads contact spreadsheets into immutable contact records.
"""
