"""VaultConfig -- a caller-held directory + format pair."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

from . import conf, vault
from .path_resolver import resolve
from .save_format import SaveFormat

T = TypeVar("T")


@dataclass(frozen=True)
class VaultConfig:
    """Explicit storage settings passed around instead of the global default.

    Every call goes through ``directory``, so a ``VaultConfig`` never reads or
    changes the process-wide default directory.
    """

    directory: Path = field(default_factory=lambda: Path(conf.DEFAULT_SAVE_DIR))
    format: SaveFormat = field(default_factory=SaveFormat.default)

    def __post_init__(self):
        object.__setattr__(self, "directory", Path(self.directory))
        object.__setattr__(self, "format", SaveFormat(self.format))

    def path_for(self, file_name: str) -> Path:
        """Where ``file_name`` would be stored. Does not touch the filesystem."""
        return resolve(file_name, self.directory, self.format, create=False)

    def save(self, value: Any, file_name: str) -> Path:
        return vault.save(value, file_name, self.directory, self.format)

    def load(self, file_name: str, cls: type[T] | None = None) -> Any:
        return vault.load(file_name, self.directory, self.format, cls=cls)

    def load_or_default(self, file_name: str, cls: type[T]) -> T:
        return vault.load_or_default(file_name, self.directory, self.format, cls=cls)
