"""Record name + directory + format to file path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import PathError
from .save_format import SaveFormat
from .vault_dir import get_default_dir

PathLike = str | os.PathLike[str]


def ensure_dir(directory: Path) -> Path:
    """Create *directory* and any missing parents. Existing directories are fine."""
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PathError(f"Failed to create directory '{directory}'", directory) from exc
    return directory


def ensure_parent(path: Path) -> Path:
    """Create the parent directory of a full file path, if it has one."""
    parent = path.parent
    if parent.parts:
        ensure_dir(parent)
    return path


def record_filename(record_name: str, fmt: SaveFormat) -> str:
    """``<record_name>.<ext>`` -- the extension always comes from *fmt*."""
    if not record_name:
        raise PathError("Record name must not be empty")
    return f"{record_name}.{SaveFormat(fmt).as_ext()}"


def resolve(
    record_name: str,
    dir: PathLike | None = None,
    fmt: SaveFormat = SaveFormat.default(),
    *,
    create: bool = True,
) -> Path:
    """Build the path for a record.

    Falls back to the process-wide default directory when *dir* is omitted.
    The default is read once, at call time. With ``create`` the directory is
    made if missing; read paths pass ``create=False`` so they leave the
    filesystem untouched.
    """
    filename = record_filename(record_name, fmt)
    directory = Path(dir) if dir is not None else get_default_dir()
    if create:
        ensure_dir(directory)
    return directory / filename
