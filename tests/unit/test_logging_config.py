"""Tests pour la configuration du logging."""

import pytest
from loguru import logger

from src.logging_config import configure_logging, resolve_log_level


class TestResolveLogLevel:
    """Tests pour resolve_log_level."""

    def test_uses_configured_level_without_options(self) -> None:
        assert resolve_log_level("warning") == "WARNING"

    @pytest.mark.parametrize("verbose,expected", [(1, "DEBUG"), (2, "TRACE"), (5, "TRACE")])
    def test_verbose_raises_verbosity(self, verbose, expected) -> None:
        assert resolve_log_level("INFO", verbose=verbose) == expected

    def test_quiet_wins_over_verbose(self) -> None:
        assert resolve_log_level("DEBUG", verbose=2, quiet=True) == "ERROR"


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_creates_log_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "cinemamode.log"

        configure_logging(log_level="INFO", log_file=log_file)
        logger.info("test message")
        logger.complete()

        assert log_file.exists()
        logger.remove()
