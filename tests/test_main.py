"""
Tests for the command line entry point
"""
from unittest.mock import MagicMock

import pytest

from plp_bookstore import __main__ as cli


class TestMain:

    def test_default_command_runs_queries(self, monkeypatch):
        run = MagicMock(return_value=True)
        monkeypatch.setattr(cli, "run_queries", run)

        assert cli.main([]) == 0
        run.assert_called_once_with(uri=None, db_name=None, page=2, limit=5)

    def test_run_options(self, monkeypatch):
        run = MagicMock(return_value=True)
        monkeypatch.setattr(cli, "run_queries", run)

        cli.main(["--uri", "mongodb://h:1/x", "--db", "shop", "run", "--page", "3", "--limit", "4"])
        run.assert_called_once_with(uri="mongodb://h:1/x", db_name="shop", page=3, limit=4)

    def test_failure_exit_code(self, monkeypatch):
        monkeypatch.setattr(cli, "run_queries", MagicMock(return_value=False))
        assert cli.main(["run"]) == 1

    def test_seed(self, monkeypatch, mongo_client):
        mongo_client.close = MagicMock()
        monkeypatch.setattr(cli.connect_db, "get_client", lambda uri=None, timeout_ms=None: mongo_client)

        assert cli.main(["--db", "plp_bookstore", "seed", "--drop"]) == 0
        assert mongo_client["plp_bookstore"]["books"].count_documents({}) == 14
        mongo_client.close.assert_called_once()

    def test_setup_failure(self, monkeypatch):
        client = MagicMock()
        client.__getitem__.return_value.command.side_effect = RuntimeError("boom")
        monkeypatch.setattr(cli.connect_db, "get_client", lambda uri=None, timeout_ms=None: client)

        assert cli.main(["--db", "plp_bookstore", "setup"]) == 1
        client.close.assert_called_once()


class TestLogLevel:

    def test_invalid_flag_is_usage_error(self, monkeypatch):
        monkeypatch.setattr(cli, "run_queries", MagicMock(return_value=True))
        with pytest.raises(SystemExit) as exc:
            cli.main(["--log-level", "verbose"])
        assert exc.value.code == 2

    def test_invalid_env_is_usage_error(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        monkeypatch.setattr(cli, "run_queries", MagicMock(return_value=True))
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == 2

    def test_lowercase_flag_accepted(self, monkeypatch):
        run = MagicMock(return_value=True)
        monkeypatch.setattr(cli, "run_queries", run)
        assert cli.main(["--log-level", "debug"]) == 0
        run.assert_called_once()
