"""
Logging configuration for fracfmt.

Library modules log to children of the ``fracfmt`` logger at DEBUG level
only (truncated expansions, rejected literals) and never install
handlers themselves.  Applications that want to see those records call
:func:`setup_logging`, which supports two output formats:

  - **human** – single-line, readable, coloured when stderr is a terminal
  - **json**  – newline-delimited JSON for log aggregators

Usage:
    from fracfmt_core.config import load_config
    from fracfmt_core.logging_config import setup_logging_from_config
    setup_logging_from_config(load_config("fracfmt.toml").logging)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .config import LoggingConfig

LOGGER_NAME = "fracfmt"

# Structured fields library modules attach through ``extra=``.
CONTEXT_FIELDS = ("max_frac_digits", "den_bits", "reason")


def _component(record: logging.LogRecord) -> str:
    """``fracfmt.expander`` -> ``expander``; foreign loggers keep their name."""
    prefix = LOGGER_NAME + "."
    return record.name[len(prefix):] if record.name.startswith(prefix) else record.name


def _context(record: logging.LogRecord) -> dict[str, object]:
    return {k: getattr(record, k) for k in CONTEXT_FIELDS if hasattr(record, k)}


class _JSONFormatter(logging.Formatter):
    """One JSON object per record, formatted digits left unescaped."""

    def format(self, record: logging.LogRecord) -> str:
        log_obj: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "component": _component(record),
            "where": f"{record.module}:{record.lineno}",
            "msg": record.getMessage(),
        }
        log_obj.update(_context(record))
        if record.exc_info and record.exc_info[1]:
            log_obj["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_obj, default=str, ensure_ascii=False)


class _HumanFormatter(logging.Formatter):
    """``12:00:01 DEBUG expander: msg max_frac_digits=5``; ANSI colour on a TTY only."""

    LEVEL_COLOURS = {
        logging.DEBUG: "\033[2m",       # dim
        logging.INFO: "",
        logging.WARNING: "\033[33m",    # yellow
        logging.ERROR: "\033[31m",      # red
        logging.CRITICAL: "\033[1;31m",
    }
    RESET = "\033[0m"

    def __init__(self, colour: bool = False) -> None:
        super().__init__()
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        line = f"{ts} {record.levelname} {_component(record)}: {record.getMessage()}"
        ctx = _context(record)
        if ctx:
            line += " " + " ".join(f"{k}={v}" for k, v in ctx.items())
        start = self.LEVEL_COLOURS.get(record.levelno, "") if self.colour else ""
        return f"{start}{line}{self.RESET}" if start else line


def setup_logging(
    level: str = "INFO",
    fmt: str = "human",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``fracfmt`` logger and return it.

    Parameters
    ----------
    level : str
        One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
    fmt : str
        ``"human"`` for single-line text output, ``"json"`` for
        newline-delimited JSON.
    log_file : str, optional
        If provided, logs are *also* written to this file (always in JSON
        format for machine parsing).
    """
    if fmt not in ("human", "json"):
        raise ValueError(f"Unknown log format {fmt!r} (expected 'human' or 'json')")

    log = logging.getLogger(LOGGER_NAME)
    log.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove any existing handlers (avoid duplicates on reload)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        console.setFormatter(_JSONFormatter())
    else:
        console.setFormatter(_HumanFormatter(colour=sys.stderr.isatty()))
    log.addHandler(console)

    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setFormatter(_JSONFormatter())  # always JSON for files
        log.addHandler(fh)

    return log


def setup_logging_from_config(cfg: LoggingConfig) -> logging.Logger:
    return setup_logging(level=cfg.level, fmt=cfg.format, log_file=cfg.file)
