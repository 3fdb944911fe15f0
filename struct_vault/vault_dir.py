"""
struct_vault - Default directory state
Process-wide fallback directory used when a call omits an explicit directory.
"""
from __future__ import annotations

import os
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from . import conf
from .log import vault_log

# =============================================================================
# LOCKING
# =============================================================================


class ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writing:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            while self._writing or self._readers:
                self._cond.wait()
            self._writing = True
        try:
            yield
        finally:
            with self._cond:
                self._writing = False
                self._cond.notify_all()


# =============================================================================
# STATE
# =============================================================================

_lock = ReadWriteLock()
_default_dir: Path | None = None


def get_default_dir() -> Path:
    """Return the current default directory, initialising it on first use."""
    global _default_dir
    with _lock.read():
        current = _default_dir
    if current is not None:
        return current
    with _lock.write():
        if _default_dir is None:
            _default_dir = Path(conf.DEFAULT_SAVE_DIR)
        return _default_dir


def set_custom_dir(path: str | os.PathLike[str]) -> None:
    """Replace the default directory for every caller in this process."""
    global _default_dir
    new_dir = Path(path)
    with _lock.write():
        _default_dir = new_dir
    vault_log(f"Default directory set to {new_dir}")


def reset_default_dir() -> None:
    """Restore the default directory to ``conf.DEFAULT_SAVE_DIR``."""
    global _default_dir
    with _lock.write():
        _default_dir = None
