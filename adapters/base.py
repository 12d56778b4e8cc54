"""
Base Query Adapter

Abstract base class defining the interface for all query adapters.
Every adapter (ignite, soda) inherits from this class and implements
run_statement(), tables() and preview_statement().

Example:
    >>> from adapters.base import BaseAdapter
    >>> class MyAdapter(BaseAdapter):
    ...     def run_statement(self, statement, comment=None) -> QueryResult:
    ...         # Implementation here
    ...         pass
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable
import json
import logging

import httpx

from models.result import AdapterSettings, QueryResult


class AdapterError(Exception):
    """Base exception for query adapter errors.

    Raised inside an adapter and converted into ``QueryResult.error``
    before run_statement returns.

    Example:
        >>> raise AdapterError("Unexpected payload", adapter="soda")
    """

    def __init__(self, message: str, adapter: Optional[str] = None, **kwargs):
        """Initialize adapter error.

        Args:
            message: Error message
            adapter: Adapter identifier
            **kwargs: Additional error context
        """
        self.message = message
        self.adapter = adapter
        self.context = kwargs
        super().__init__(message)


class ResponseError(AdapterError):
    """Exception raised when a response is missing data the adapter needs.

    Example:
        >>> raise ResponseError("Missing x-soda2-fields header", adapter="soda")
    """
    pass


@runtime_checkable
class QueryAdapter(Protocol):
    """Contract the host dispatches on."""

    def run_statement(self, statement: str, comment: Optional[str] = None) -> QueryResult:
        ...

    def tables(self) -> List[str]:
        ...

    def preview_statement(self) -> str:
        ...


class BaseAdapter(ABC):
    """Abstract base class for all query adapters.

    Attributes:
        settings: Immutable adapter configuration
        data_source: Host hook exposing run_statement(), or None
        client: Synchronous HTTP client with connect/read timeouts

    Example:
        >>> adapter = SodaAdapter({"url": "https://data.example.gov/resource/x.json"})
        >>> result = adapter.run_statement("SELECT * LIMIT 10")
        >>> result.columns
        ['name', 'count']
    """

    name = "base"

    def __init__(
        self,
        settings: Union[AdapterSettings, Mapping[str, Any]],
        data_source: Optional[Any] = None
    ):
        """Initialize query adapter.

        Args:
            settings: AdapterSettings or a mapping accepted by it
            data_source: Object whose run_statement() wraps this adapter

        Raises:
            pydantic.ValidationError: If settings are invalid
        """
        if not isinstance(settings, AdapterSettings):
            settings = AdapterSettings.model_validate(dict(settings))

        self.settings = settings
        self.data_source = data_source
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.client = httpx.Client(
            timeout=httpx.Timeout(settings.read_timeout, connect=settings.open_timeout)
        )

    @abstractmethod
    def run_statement(self, statement: str, comment: Optional[str] = None) -> QueryResult:
        """Execute a statement and return a tabular result.

        Must never raise: every failure is reported through
        ``QueryResult.error``.

        Args:
            statement: SQL-like statement
            comment: Tag for server-side auditing (adapter specific)

        Returns:
            QueryResult
        """
        raise NotImplementedError("Subclasses must implement run_statement()")

    @abstractmethod
    def tables(self) -> List[str]:
        """List the tables a user can query."""
        raise NotImplementedError("Subclasses must implement tables()")

    @abstractmethod
    def preview_statement(self) -> str:
        """Statement template used to preview a table."""
        raise NotImplementedError("Subclasses must implement preview_statement()")

    def schema(self) -> List[Dict[str, Any]]:
        """Column-level schema. Adapters without introspection return []."""
        return []

    def reconnect(self) -> None:
        """Drop any cached connection state."""
        pass

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def _error_from_body(self, response: httpx.Response, key: str, fallback: str) -> str:
        """Read an error message from a JSON body.

        Args:
            response: HTTP response
            key: Body field holding the message
            fallback: Returned when the body is not JSON or lacks the field

        Returns:
            Error message

        Example:
            >>> adapter._error_from_body(response, "message", "Bad response: 500")
            'Bad response: 500'
        """
        try:
            message = response.json()[key]
        except (json.JSONDecodeError, ValueError, KeyError, TypeError, IndexError):
            return fallback
        return str(message) if message else fallback

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(url={self._display_url()})"

    def _display_url(self) -> str:
        return self.settings.url
