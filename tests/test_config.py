"""Tests for environment-driven configuration and logging setup."""

import logging
from pathlib import Path

import pytest

from flight_planner import cli
from flight_planner.config import PlannerConfig


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in [
        "FLIGHTS_FILE",
        "REQUESTS_FILE",
        "OUTPUT_FILE",
        "TOP_N",
        "MAX_PATHS",
        "MAX_DEPTH",
        "WORKERS",
        "LOG_LEVEL",
    ]:
        monkeypatch.delenv(f"FLIGHT_PLANNER_{name}", raising=False)


class TestPlannerConfig:
    def test_defaults_match_original_file_names(self):
        config = PlannerConfig.from_env()

        assert config.flights_file == "flight_data.txt"
        assert config.requests_file == "requests.txt"
        assert config.output_file == "output.txt"
        assert config.top_n == 3
        assert config.max_paths is None
        assert config.max_depth is None
        assert config.workers == 1

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("FLIGHT_PLANNER_TOP_N", "5")
        monkeypatch.setenv("FLIGHT_PLANNER_MAX_DEPTH", "4")
        monkeypatch.setenv("FLIGHT_PLANNER_FLIGHTS_FILE", "legs.txt")

        config = PlannerConfig.from_env()

        assert config.top_n == 5
        assert config.max_depth == 4
        assert config.flights_file == "legs.txt"

    def test_non_integer_environment_value(self, monkeypatch):
        monkeypatch.setenv("FLIGHT_PLANNER_WORKERS", "many")

        with pytest.raises(ValueError, match="FLIGHT_PLANNER_WORKERS"):
            PlannerConfig.from_env()

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"top_n": -1}, "top_n"),
            ({"max_paths": 0}, "max_paths"),
            ({"max_depth": 0}, "max_depth"),
            ({"workers": 0}, "workers"),
        ],
    )
    def test_invalid_values(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            PlannerConfig(**kwargs)

    def test_is_frozen(self):
        config = PlannerConfig()

        with pytest.raises(AttributeError):
            config.top_n = 10  # type: ignore


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level = root.level
        yield
        for handler in list(cli._installed_handlers):
            root.removeHandler(handler)
            handler.close()
        cli._installed_handlers.clear()
        root.setLevel(level)

    def test_replaces_its_own_handlers(self):
        cli.setup_logging("INFO")
        cli.setup_logging("DEBUG")

        assert len(cli._installed_handlers) == 1
        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "planner.log"
        cli.setup_logging("WARNING", str(log_file))

        logging.getLogger("flight_planner.test").debug("written to file")
        for handler in cli._installed_handlers:
            handler.flush()

        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            cli.setup_logging("LOUD")
