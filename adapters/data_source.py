"""
Data Source wrapper

The host-side object an adapter calls back into. It owns one adapter,
fills in the default statement comment and logs every statement with
its duration.

Example:
    >>> from adapters import DataSource, IgniteAdapter
    >>> source = DataSource("warehouse", IgniteAdapter({"url": "http://localhost:8080"}))
    >>> source.tables()
    ['city', 'sales.orders']
"""

import logging
import time
from typing import List, Optional

from adapters.base import BaseAdapter
from config import settings
from models.result import QueryResult

logger = logging.getLogger(__name__)


class DataSource:
    """Named data source backed by a single adapter.

    Attaches itself as ``adapter.data_source`` so adapters route their own
    metadata queries through run_statement().

    Attributes:
        name: Data source name, used in logs
        adapter: Query adapter
        default_comment: Comment used when run_statement() gets none
    """

    def __init__(
        self,
        name: str,
        adapter: BaseAdapter,
        default_comment: Optional[str] = None
    ):
        self.name = name
        self.adapter = adapter
        self.default_comment = default_comment or settings.QUERY_COMMENT
        adapter.data_source = self

    def run_statement(self, statement: str, comment: Optional[str] = None) -> QueryResult:
        """Run a statement through the adapter.

        Args:
            statement: Statement text
            comment: Audit tag, defaults to ``default_comment``

        Returns:
            QueryResult from the adapter
        """
        start_time = time.monotonic()
        result = self.adapter.run_statement(statement, comment or self.default_comment)
        duration_ms = (time.monotonic() - start_time) * 1000

        if result.error:
            logger.warning(
                f"Statement failed on {self.name}: {result.error}",
                extra={"data_source": self.name, "duration_ms": round(duration_ms, 2)}
            )
        else:
            logger.debug(
                f"Statement on {self.name} returned {result.row_count} rows in {duration_ms:.1f}ms",
                extra={"data_source": self.name, "duration_ms": round(duration_ms, 2)}
            )

        return result

    def tables(self) -> List[str]:
        return self.adapter.tables()

    def preview_statement(self) -> str:
        return self.adapter.preview_statement()

    def close(self) -> None:
        self.adapter.close()

    def __repr__(self) -> str:
        return f"DataSource(name={self.name}, adapter={self.adapter!r})"
