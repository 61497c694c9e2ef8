"""Loguru setup for long-running CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from rpcgate.config.loader import get_data_dir
from rpcgate.config.schema import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <7}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)

_file_sinks: dict[str, int] = {}
_console_sink: int | None = None


def ensure_rotating_log_file(name: str, level: str = "INFO", log_dir: Path | None = None) -> Path:
    """Attach ``<log_dir>/<name>.log`` once per name; later calls return the same path."""
    log_dir = log_dir or get_data_dir() / "logs"
    log_path = log_dir / f"{name}.log"
    if name in _file_sinks:
        return log_path
    log_dir.mkdir(parents=True, exist_ok=True)
    _file_sinks[name] = logger.add(
        str(log_path),
        level=level,
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        encoding="utf-8",
        backtrace=False,
        diagnose=False,
    )
    return log_path


def remove_log_file_sink(name: str) -> None:
    sink_id = _file_sinks.pop(name, None)
    if sink_id is not None:
        logger.remove(sink_id)


def configure_logging(
    settings: LoggingConfig,
    *,
    command: str,
    verbose: bool = False,
    log_dir: Path | None = None,
) -> Path | None:
    """Replace loguru's default stderr sink with one at the configured level.

    Returns the rotating log file path when file logging is enabled.
    """
    global _console_sink
    level = "DEBUG" if verbose else settings.level.upper()
    if _console_sink is None:
        logger.remove()
    else:
        logger.remove(_console_sink)
    _console_sink = logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)
    if not settings.file_enabled:
        return None
    return ensure_rotating_log_file(command, level=level, log_dir=log_dir)
