"""Unit Tests for the DataSource wrapper and the command line runner

Run with:
    pytest tests/unit/test_data_source.py -v
"""

from unittest.mock import MagicMock, patch

import pytest

import main
from adapters.base import BaseAdapter, QueryAdapter
from adapters.data_source import DataSource
from adapters.ignite import IgniteAdapter, TABLES_SQL
from adapters.soda import SodaAdapter
from models.result import QueryResult
from conftest import SODA_URL, ignite_query_body, make_response


class TestDataSource:
    """Tests for DataSource delegation."""

    def test_attaches_to_adapter(self, ignite_adapter):
        source = DataSource("cluster", ignite_adapter)
        assert ignite_adapter.data_source is source

    def test_default_comment(self):
        adapter = MagicMock(spec=BaseAdapter)
        adapter.run_statement.return_value = QueryResult(columns=["a"], rows=[[1]])
        source = DataSource("cluster", adapter, default_comment="audit")

        result = source.run_statement("SELECT 1")

        adapter.run_statement.assert_called_once_with("SELECT 1", "audit")
        assert result.rows == [[1]]

    def test_explicit_comment(self):
        adapter = MagicMock(spec=BaseAdapter)
        adapter.run_statement.return_value = QueryResult()
        source = DataSource("cluster", adapter, default_comment="audit")

        source.run_statement("SELECT 1", "user:42")

        adapter.run_statement.assert_called_once_with("SELECT 1", "user:42")

    def test_error_result_passed_through(self):
        adapter = MagicMock(spec=BaseAdapter)
        adapter.run_statement.return_value = QueryResult.failure("Bad response: 500")
        source = DataSource("cluster", adapter, default_comment="audit")

        assert source.run_statement("SELECT 1").error == "Bad response: 500"

    def test_ignite_tables_route_through_data_source(self, ignite_adapter):
        source = DataSource("cluster", ignite_adapter, default_comment="audit")
        body = ignite_query_body(
            [
                {"fieldName": "TABLE_SCHEMA", "fieldTypeName": "java.lang.String"},
                {"fieldName": "TABLE_NAME", "fieldTypeName": "java.lang.String"},
            ],
            [["PUBLIC", "CITY"], ["SALES", "ORDERS"]]
        )
        with patch.object(ignite_adapter.client, "get", return_value=make_response(200, body)) as mock_get:
            tables = source.tables()

        assert tables == ["city", "sales.orders"]
        assert mock_get.call_args.kwargs["params"]["qry"] == f"{TABLES_SQL} /*audit*/"

    def test_preview_statement(self, soda_adapter):
        assert DataSource("open-data", soda_adapter).preview_statement() == "SELECT * LIMIT 10"

    @pytest.mark.parametrize("adapter_class", [IgniteAdapter, SodaAdapter])
    def test_adapters_satisfy_query_adapter(self, adapter_class):
        adapter = adapter_class({"url": "http://localhost:8080"})
        assert isinstance(adapter, QueryAdapter)
        adapter.close()


class TestMain:
    """Tests for the command line runner."""

    def test_preview(self, monkeypatch, capsys):
        monkeypatch.setattr(main.settings, "SODA_URL", SODA_URL)

        assert main.main(["soda", "--preview"]) == 0
        assert capsys.readouterr().out.strip() == "SELECT * LIMIT 10"

    def test_tables(self, monkeypatch, capsys):
        monkeypatch.setattr(main.settings, "SODA_URL", SODA_URL)

        assert main.main(["soda", "--tables"]) == 0
        assert capsys.readouterr().out.strip() == "all"

    def test_statement(self, monkeypatch, capsys):
        monkeypatch.setattr(main.settings, "SODA_URL", SODA_URL)
        result = QueryResult(columns=["name", "count"], rows=[["Bronx", 12], ["Queens", None]])

        with patch.object(SodaAdapter, "run_statement", return_value=result):
            assert main.main(["soda", "SELECT name, count"]) == 0

        assert capsys.readouterr().out.splitlines() == ["name\tcount", "Bronx\t12", "Queens\t"]

    def test_statement_error(self, monkeypatch, capsys):
        monkeypatch.setattr(main.settings, "SODA_URL", SODA_URL)

        with patch.object(SodaAdapter, "run_statement", return_value=QueryResult.failure("Bad response: 400")):
            assert main.main(["soda", "SELEC"]) == 1

        assert "Bad response: 400" in capsys.readouterr().err

    def test_missing_statement(self, monkeypatch):
        monkeypatch.setattr(main.settings, "SODA_URL", SODA_URL)
        assert main.main(["soda"]) == 2

    def test_unconfigured_endpoint(self, monkeypatch):
        monkeypatch.setattr(main.settings, "IGNITE_URL", None)
        assert main.main(["ignite", "SELECT 1"]) == 2
