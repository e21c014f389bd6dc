"""
Tests for argument handling and exit codes of the CLI.
"""
import sys

import pytest
from click.testing import CliRunner

import src.ingest_openf1.pipeline as pipeline_module
from src import cli as cli_module
from src.config import cfg
from src.ingest_openf1.api_client import OpenF1APIError
from src.utils.logger import logger


@pytest.fixture(autouse=True)
def _logs_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setattr(cfg.paths, "logs", tmp_path / "logs")
    yield
    # CliRunner streams are closed once invoke returns
    logger.remove()
    logger.add(sys.stderr)


class TestParseYears:
    def test_numeric_tokens_kept(self):
        assert cli_module.parse_years(("2022", "2024")) == [2022, 2024]

    def test_non_numeric_tokens_discarded(self):
        assert cli_module.parse_years(("2022", "latest", "x24")) == [2022]

    def test_defaults_when_nothing_left(self):
        assert cli_module.parse_years(("abc",)) == [2023, 2024]
        assert cli_module.parse_years(()) == [2023, 2024]

    def test_zero_discarded(self):
        assert cli_module.parse_years(("0", "2021")) == [2021]


class TestFetchCommand:
    def test_passes_years_and_output(self, tmp_path, monkeypatch):
        calls = []
        monkeypatch.setattr(
            pipeline_module, "run_fetch_pipeline",
            lambda years, output_path=None: calls.append((years, output_path)) or [],
        )
        out = tmp_path / "races.json"
        result = CliRunner().invoke(cli_module.cli, ["fetch", "2021", "nope", "--output", str(out)])
        assert result.exit_code == 0
        assert calls == [([2021], out)]

    def test_fatal_error_exits_nonzero(self, monkeypatch):
        def boom(years, output_path=None):
            raise OpenF1APIError(503, "https://api.openf1.org/v1/sessions")

        monkeypatch.setattr(pipeline_module, "run_fetch_pipeline", boom)
        result = CliRunner().invoke(cli_module.cli, ["fetch"])
        assert result.exit_code == 1
