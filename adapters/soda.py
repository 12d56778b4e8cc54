"""
Socrata Open Data (SODA) Query Adapter

Sends SoQL through the ``$query`` parameter of a SODA dataset endpoint
and reads column names and types from the ``x-soda2-*`` response headers.
Plain httpx is used instead of a Socrata client library to get column
types and the API's own error messages.

Example:
    >>> from adapters.soda import SodaAdapter
    >>> adapter = SodaAdapter({
    ...     "url": "https://data.example.gov/resource/abcd-1234.json",
    ...     "app_token": "token-123"
    ... })
    >>> result = adapter.run_statement("SELECT borough, count(*) GROUP BY borough")
"""

import json
from typing import Any, Dict, List, Optional

import httpx

from adapters.base import BaseAdapter, ResponseError
from models.result import QueryResult
from utils.sql_text import clean_soda_statement

FIELDS_HEADER = "x-soda2-fields"
TYPES_HEADER = "x-soda2-types"
# computed region / geo-internal columns
HIDDEN_COLUMN_PREFIX = ":@"
NUMBER_TYPE = "number"


def coerce_number(value: Any) -> Any:
    """Convert a SODA number cell to int when whole, float otherwise.

    Example:
        >>> coerce_number("3.0")
        3
        >>> coerce_number(3.5)
        3.5
    """
    if value is None:
        return None
    number = float(value)
    return int(number) if number.is_integer() else number


class SodaAdapter(BaseAdapter):
    """Adapter for Socrata Open Data API datasets.

    Each dataset is a single table, so tables() is fixed to ["all"].

    Attributes:
        settings: Adapter configuration (url, app_token)

    Example:
        >>> adapter = SodaAdapter({"url": "https://data.example.gov/resource/abcd-1234.json"})
        >>> adapter.preview_statement()
        'SELECT * LIMIT 10'
    """

    name = "soda"

    def run_statement(self, statement: str, comment: Optional[str] = None) -> QueryResult:
        """Execute a SoQL statement.

        SODA rejects comments and trailing semicolons, so they are stripped
        first. ``comment`` is accepted for interface parity and ignored.

        Args:
            statement: SoQL statement
            comment: Unused

        Returns:
            QueryResult; failures are reported in ``error``
        """
        headers = {}
        if self.settings.app_token:
            headers["X-App-Token"] = self.settings.app_token

        try:
            statement = clean_soda_statement(statement)

            self.logger.debug(f"Making SODA request to {self.settings.url}")
            response = self.client.get(
                self.settings.url,
                params={"$query": statement},
                headers=headers
            )

            if not response.is_success:
                return QueryResult.failure(
                    self._error_from_body(
                        response, "message", f"Bad response: {response.status_code}"
                    )
                )

            body = response.json()
            if not isinstance(body, list):
                raise ResponseError(
                    f"Expected a JSON array, got {type(body).__name__}",
                    adapter=self.name
                )

            fields = self._header_list(response, FIELDS_HEADER)
            types = self._header_list(response, TYPES_HEADER)
            # built before filtering; lookups are by name
            column_types: Dict[str, Any] = dict(zip(fields, types))

            columns = [f for f in fields if not str(f).startswith(HIDDEN_COLUMN_PREFIX)]
            # records omit keys for null values
            rows = [[record.get(c) for c in columns] for record in body]

            for i, column in enumerate(columns):
                if column_types.get(column) == NUMBER_TYPE:
                    for row in rows:
                        row[i] = coerce_number(row[i])

            self.logger.debug(
                f"SODA query returned {len(rows)} rows",
                extra={"columns": len(columns), "rows": len(rows)}
            )
            return QueryResult(columns=columns, rows=rows)

        except Exception as e:
            self.logger.warning(
                f"SODA query failed: {str(e)}",
                extra={"error_type": e.__class__.__name__}
            )
            return QueryResult.failure(str(e) or e.__class__.__name__)

    def _header_list(self, response: httpx.Response, name: str) -> List[Any]:
        """Decode a JSON array carried in a response header.

        Raises:
            ResponseError: If the header is missing or not a JSON array
        """
        raw = response.headers.get(name)
        if raw is None:
            raise ResponseError(f"Missing {name} header", adapter=self.name)

        value = json.loads(raw)
        if not isinstance(value, list):
            raise ResponseError(f"Invalid {name} header", adapter=self.name)
        return value

    def preview_statement(self) -> str:
        return "SELECT * LIMIT 10"

    def tables(self) -> List[str]:
        return ["all"]
