"""Process-local config cache, refreshed when the file on disk changes."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from rpcgate.config.loader import get_config_path, load_config
from rpcgate.config.schema import Config


@dataclass(slots=True)
class _Entry:
    config: Config
    mtime_ns: int | None


_lock = threading.RLock()
_entries: dict[Path, _Entry] = {}


def _resolve(config_path: Path | None) -> Path:
    return Path(config_path or get_config_path()).expanduser().resolve()


def _mtime_ns(path: Path) -> int | None:
    try:
        return path.stat().st_mtime_ns
    except FileNotFoundError:
        return None


def get_config(*, config_path: Path | None = None, force_reload: bool = False) -> Config:
    """Return the cached Config for ``config_path``.

    The entry is reloaded when ``force_reload`` is set or the file was
    created, removed or modified since it was cached.
    """
    path = _resolve(config_path)
    mtime = _mtime_ns(path)
    with _lock:
        entry = _entries.get(path)
        if entry is None or force_reload or entry.mtime_ns != mtime:
            if entry is not None:
                logger.debug("Reloading config from {}", path)
            entry = _Entry(config=load_config(path), mtime_ns=mtime)
            _entries[path] = entry
        return entry.config


def clear_config_cache(*, config_path: Path | None = None) -> None:
    """Drop one cached entry, or all of them when no path is given."""
    with _lock:
        if config_path is None:
            _entries.clear()
        else:
            _entries.pop(_resolve(config_path), None)
