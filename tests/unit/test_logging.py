"""
Unit tests for logging configuration.
"""
import logging

from tinysensor.core import logging as app_logging
from tinysensor.core.logging import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging"""

    def test_reconfiguring_replaces_previous_handlers(self):
        root_logger = logging.getLogger()

        configure_logging()
        first = list(app_logging._handlers)
        configure_logging()
        second = list(app_logging._handlers)

        assert len(second) == 1
        assert second[0] in root_logger.handlers
        for handler in first:
            assert handler not in root_logger.handlers

    def test_file_log_is_added_when_configured(self, tmp_path, monkeypatch):
        from tinysensor.config import get_settings

        log_file = tmp_path / "tinysensor.log"
        monkeypatch.setattr(get_settings(), "LOG_FILE", str(log_file))
        try:
            configure_logging()
            assert len(app_logging._handlers) == 2
            assert any(
                isinstance(h, logging.FileHandler) and h.baseFilename == str(log_file)
                for h in app_logging._handlers
            )
        finally:
            monkeypatch.undo()
            configure_logging()

        assert len(app_logging._handlers) == 1
