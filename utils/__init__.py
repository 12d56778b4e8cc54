"""Utility modules for the query adapters

Provides SQL text cleanup and URL helpers.
"""

from utils.sql_text import (
    strip_sql_comments,
    strip_trailing_semicolon,
    squish,
    clean_soda_statement
)

from utils.urls import mask_password

__all__ = [
    # SQL text
    "strip_sql_comments",
    "strip_trailing_semicolon",
    "squish",
    "clean_soda_statement",

    # URLs
    "mask_password",
]
