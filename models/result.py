"""
Result and Settings Models for the query adapters

Pydantic v2 models shared by every adapter:
    1. AdapterSettings (immutable per-adapter configuration)
    2. QueryResult (uniform tabular result of run_statement)

Example:
    >>> from models.result import QueryResult
    >>> result = QueryResult(columns=["id"], rows=[[1], [2]])
    >>> result.succeeded
    True
"""

from datetime import date, datetime
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

TypedValue = Union[str, int, float, date, datetime, None]


class AdapterSettings(BaseModel):
    """Configuration supplied to an adapter at construction time.

    Frozen after creation: adapters read it, never write it.

    Attributes:
        url: Base endpoint, may embed ``user:password@`` (Ignite)
        app_token: Socrata application token (SODA only)
        open_timeout: Connect timeout in seconds
        read_timeout: Read timeout in seconds

    Example:
        >>> AdapterSettings(url="https://data.example.gov/resource/abcd-1234.json")
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = Field(..., min_length=1)
    app_token: Optional[str] = None
    open_timeout: float = Field(default=3.0, gt=0)
    read_timeout: float = Field(default=30.0, gt=0)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Require an absolute http(s) URL.

        Raises:
            ValueError: If the URL has another scheme or no host
        """
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid URL format: {v}")
        return v


class QueryResult(BaseModel):
    """Tabular result returned by ``run_statement``.

    Exactly one of success or error is meaningful: when ``error`` is set,
    ``columns`` and ``rows`` are empty.

    Attributes:
        columns: Ordered column names
        rows: Positional rows, one cell per column
        error: Error message, None on success
    """

    columns: List[str] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def failure(cls, message: Optional[str]) -> "QueryResult":
        """Build an error result with empty columns and rows.

        Example:
            >>> QueryResult.failure("Bad response: 500").error
            'Bad response: 500'
        """
        return cls(error=message or "Unknown error")

    @property
    def succeeded(self) -> bool:
        return not self.error

    @property
    def row_count(self) -> int:
        return len(self.rows)
