from __future__ import annotations

import logging

import pytest

from stylecore.config import StylecoreConfig, configure_logging
from stylecore.errors import SelectorParseError, StylecoreError


@pytest.fixture()
def stylecore_logger():
    log = logging.getLogger("stylecore")
    level, handlers = log.level, list(log.handlers)
    yield log
    log.setLevel(level)
    log.handlers[:] = handlers


class TestStylecoreConfig:
    def test_default_values(self) -> None:
        cfg = StylecoreConfig()
        assert cfg.log_level == "WARNING"
        assert cfg.output_format == "text"

    def test_custom_values(self) -> None:
        cfg = StylecoreConfig(log_level="debug", output_format="json")
        assert cfg.log_level == "debug"
        assert cfg.output_format == "json"

    def test_unknown_format(self) -> None:
        with pytest.raises(ValueError):
            StylecoreConfig(output_format="yaml")

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ValueError):
            StylecoreConfig(log_level="chatty")

    def test_frozen(self) -> None:
        cfg = StylecoreConfig()
        with pytest.raises(AttributeError):
            cfg.log_level = "INFO"  # type: ignore[misc]


class TestConfigureLogging:
    def test_sets_level(self, stylecore_logger: logging.Logger) -> None:
        log = configure_logging(StylecoreConfig(log_level="debug"))
        assert log is stylecore_logger
        assert log.level == logging.DEBUG

    def test_single_handler_after_repeat(self, stylecore_logger: logging.Logger) -> None:
        configure_logging(StylecoreConfig())
        configure_logging(StylecoreConfig())
        assert len(stylecore_logger.handlers) == 1

    def test_parser_logs_depth(self, caplog: pytest.LogCaptureFixture) -> None:
        from stylecore.selector import parse_selector

        with caplog.at_level(logging.DEBUG, logger="stylecore"):
            parse_selector("#a .b .c")
        assert "3 level(s)" in caplog.text


class TestErrors:
    def test_base_error_cause(self) -> None:
        orig = ValueError("original")
        err = StylecoreError("wrapped", cause=orig)
        assert str(err) == "wrapped"
        assert err.cause is orig

    def test_parse_error_position(self) -> None:
        err = SelectorParseError("bad", line=1, column=4)
        assert isinstance(err, StylecoreError)
        assert (err.line, err.column) == (1, 4)
        assert err.cause is None
