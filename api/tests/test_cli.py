"""Tests for the management CLI."""

from unittest.mock import patch

import pytest

from cli import build_parser, main

pytestmark = pytest.mark.unit


class TestParser:
    def test_serve_defaults(self):
        args = build_parser().parse_args(["serve"])

        assert args.command == "serve"
        assert args.host == "127.0.0.1"
        assert args.port == 8000
        assert args.reload is False

    def test_serve_options(self):
        args = build_parser().parse_args(
            ["serve", "--host", "0.0.0.0", "--port", "9000", "--reload"]
        )

        assert (args.host, args.port, args.reload) == ("0.0.0.0", 9000, True)


class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "create-tables" in capsys.readouterr().out

    def test_create_tables_against_memory_database(self):
        assert main(["create-tables"]) == 0

    def test_create_tables_disposes_engine_on_failure(self):
        with (
            patch("core.database.create_tables", side_effect=RuntimeError("boom")),
            patch("core.database.dispose_engine") as mock_dispose,
        ):
            with pytest.raises(RuntimeError, match="boom"):
                main(["create-tables"])

        mock_dispose.assert_awaited_once()

    def test_serve_runs_uvicorn(self):
        with patch("uvicorn.run") as mock_run:
            assert main(["serve", "--port", "8123"]) == 0

        mock_run.assert_called_once_with(
            "main:app", host="127.0.0.1", port=8123, reload=False
        )
