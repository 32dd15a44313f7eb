"""
Reporting for ContactDedup.

Renders match results for the console and summarizes tier distribution.
"""
