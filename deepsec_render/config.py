"""Settings read from the environment (and a ``.env`` file when present)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .render import DEFAULT_MAX_NESTING
from .result import Err, Ok, Result
from .trace import TraceLevel

ENV_PREFIX = "DEEPSEC_RENDER_"

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "WARNING"
    indent_width: int = 3
    trace_level: TraceLevel = TraceLevel.IO
    max_nesting: int = DEFAULT_MAX_NESTING

    @property
    def indent(self) -> str:
        return " " * self.indent_width

    @classmethod
    def from_env(cls) -> Result["Settings", ValueError]:
        """Build settings from ``DEEPSEC_RENDER_*`` variables, defaults otherwise."""
        load_dotenv()
        defaults = cls()

        log_level = os.getenv(ENV_PREFIX + "LOG_LEVEL", defaults.log_level).strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            return Err(ValueError(f"Unknown log level: {log_level!r}"))

        match _int_env("INDENT", defaults.indent_width):
            case Ok(indent_width) if indent_width >= 0:
                pass
            case Ok(indent_width):
                return Err(ValueError(f"Indent width must be >= 0, got {indent_width}"))
            case Err(e):
                return Err(e)

        match _int_env("MAX_NESTING", defaults.max_nesting):
            case Ok(max_nesting) if max_nesting > 0:
                pass
            case Ok(max_nesting):
                return Err(ValueError(f"Max nesting must be > 0, got {max_nesting}"))
            case Err(e):
                return Err(e)

        raw_level = os.getenv(ENV_PREFIX + "TRACE_LEVEL", defaults.trace_level.value)
        try:
            trace_level = TraceLevel(raw_level.strip().lower())
        except ValueError:
            return Err(ValueError(f"Unknown trace level: {raw_level!r}"))

        return Ok(
            cls(
                log_level=log_level,
                indent_width=indent_width,
                trace_level=trace_level,
                max_nesting=max_nesting,
            )
        )


def _int_env(name: str, default: int) -> Result[int, ValueError]:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return Ok(default)
    try:
        return Ok(int(raw))
    except ValueError:
        return Err(ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}"))


def configure_logging(level: str | int = "WARNING") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
