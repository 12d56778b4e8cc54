"""
SQL Text Utilities

Best-effort textual preprocessing for statements sent to HTTP query APIs
that reject SQL comments and trailing semicolons (SODA).

These are regex based, not a SQL parser: ``--`` inside string literals is
treated as a comment and multi-line ``/* */`` blocks are left untouched.

Example:
    >>> from utils.sql_text import clean_soda_statement
    >>> clean_soda_statement("SELECT a -- comment\\n FROM t;")
    'SELECT a FROM t'
"""

import re

LINE_COMMENT_RE = re.compile(r"--.+")
# single line only; greedy, so two comments on one line swallow the text between them
BLOCK_COMMENT_RE = re.compile(r"/\*.+\*/")
TRAILING_SEMICOLON_RE = re.compile(r";\s*\Z")
WHITESPACE_RE = re.compile(r"\s+")


def strip_sql_comments(statement: str) -> str:
    """Remove ``--`` line comments and single-line ``/* */`` comments.

    Args:
        statement: SQL text

    Returns:
        Statement without comments

    Example:
        >>> strip_sql_comments("SELECT 1 /* tag */ -- note")
        'SELECT 1  '
    """
    statement = LINE_COMMENT_RE.sub("", statement)
    return BLOCK_COMMENT_RE.sub("", statement)


def strip_trailing_semicolon(statement: str) -> str:
    """Remove one trailing semicolon and any whitespace after it."""
    return TRAILING_SEMICOLON_RE.sub("", statement, count=1)


def squish(text: str) -> str:
    """Collapse every whitespace run to one space and trim both ends.

    Example:
        >>> squish("  SELECT\\n\\t a  FROM t ")
        'SELECT a FROM t'
    """
    if not text:
        return ""
    return WHITESPACE_RE.sub(" ", text).strip()


def clean_soda_statement(statement: str) -> str:
    """Prepare a statement for the SODA ``$query`` parameter.

    Applies, in order: comment stripping, trailing semicolon removal,
    whitespace squishing.
    """
    statement = strip_sql_comments(statement)
    statement = strip_trailing_semicolon(statement)
    return squish(statement)
