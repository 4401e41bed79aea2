from __future__ import annotations

import logging
import sys
from dataclasses import dataclass

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class StylecoreConfig:
    log_level: str = "WARNING"
    output_format: str = "text"  # "text" or "json"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {self.output_format!r}")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level!r}")


def configure_logging(config: StylecoreConfig) -> logging.Logger:
    """Point the ``stylecore`` logger at the current stderr with the configured level."""
    log = logging.getLogger("stylecore")
    log.setLevel(config.log_level.upper())
    for handler in list(log.handlers):
        log.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    log.addHandler(handler)
    return log
