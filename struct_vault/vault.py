"""Save and load structured values as JSON, YAML or TOML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from .errors import IoError, VaultError
from .log import vault_log
from .path_resolver import PathLike, ensure_parent, resolve
from .save_format import SaveFormat, deserialize, serialize

T = TypeVar("T")


# -- File I/O --

def _write(path: Path, data: bytes) -> None:
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as exc:
        raise IoError(f"Failed to write file '{path}'", path) from exc


def _read(path: Path) -> bytes:
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as exc:
        raise IoError(f"Failed to read file '{path}'", path) from exc


# -- Named records --

def save(
    value: Any,
    file_name: str,
    dir: PathLike | None = None,
    fmt: SaveFormat = SaveFormat.default(),
) -> Path:
    """Write *value* to ``<dir>/<file_name>.<ext>``, replacing any existing file.

    The directory (or the process-wide default) is created if missing.
    Returns the path written.
    """
    data = serialize(fmt, value)
    path = resolve(file_name, dir, fmt)
    _write(path, data)
    vault_log(f"Saved '{file_name}' to {path}")
    return path


def load(
    file_name: str,
    dir: PathLike | None = None,
    fmt: SaveFormat = SaveFormat.default(),
    *,
    cls: type[T] | None = None,
) -> Any:
    """Read ``<dir>/<file_name>.<ext>`` and decode it.

    With *cls* the decoded data is validated into that type (a pydantic model,
    dataclass, TypedDict, ...); without it the plain decoded data is returned.
    Reading never creates directories.
    """
    path = resolve(file_name, dir, fmt, create=False)
    value = deserialize(fmt, _read(path), cls)
    vault_log(f"Loaded '{file_name}' from {path}")
    return value


def load_or_default(
    file_name: str,
    dir: PathLike | None = None,
    fmt: SaveFormat = SaveFormat.default(),
    *,
    cls: type[T],
) -> T:
    """Like ``load`` but return ``cls()`` when the record is missing or unusable."""
    try:
        return load(file_name, dir, fmt, cls=cls)
    except VaultError as exc:
        vault_log(f"Falling back to default {cls.__name__} for '{file_name}': {exc}")
        return cls()


# -- Explicit paths --

def save_to_path(
    value: Any,
    path: PathLike,
    fmt: SaveFormat = SaveFormat.default(),
) -> Path:
    """Write *value* to exactly *path*, creating its parent directories."""
    p = Path(path)
    data = serialize(fmt, value)
    ensure_parent(p)
    _write(p, data)
    vault_log(f"Saved to {p}")
    return p


def load_from_path(
    path: PathLike,
    fmt: SaveFormat = SaveFormat.default(),
    *,
    cls: type[T] | None = None,
) -> Any:
    """Read and decode the file at *path*."""
    p = Path(path)
    value = deserialize(fmt, _read(p), cls)
    vault_log(f"Loaded from {p}")
    return value
