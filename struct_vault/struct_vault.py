"""StructVault -- save()/load() methods for dataclasses and pydantic models."""

from __future__ import annotations

import os
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel

from . import vault
from .save_format import SaveFormat
from .vault_dir import set_custom_dir as _set_custom_dir

V = TypeVar("V", bound="StructVault")


def _field_names(obj: object) -> list[str]:
    if isinstance(obj, BaseModel):
        return list(type(obj).model_fields)
    if is_dataclass(obj):
        return [f.name for f in fields(obj)]
    return list(vars(obj))


class StructVault:
    """Mixin that persists an instance under a name derived from its class.

    Records go to ``<default dir>/<ClassName>.toml`` unless a directory or a
    full path is given. Loading replaces the instance's field values in place::

        @dataclass
        class AppState(StructVault):
            profile: str = ""
            level: int = 0

        state = AppState(profile="player-one", level=7)
        state.save()
        state.load()

    Override ``vault_filename`` to store under a different name.
    """

    @classmethod
    def vault_filename(cls) -> str:
        return cls.__name__

    @classmethod
    def vault_format(cls) -> SaveFormat:
        return SaveFormat.default()

    @staticmethod
    def set_custom_dir(path: str | os.PathLike[str]) -> None:
        """Change the default directory for *every* record type in the process."""
        _set_custom_dir(path)

    def _adopt(self: V, other: V) -> V:
        for name in _field_names(other):
            setattr(self, name, getattr(other, name))
        return self

    # -- Load --

    def load(self: V) -> V:
        loaded = vault.load(self.vault_filename(), None, self.vault_format(), cls=type(self))
        return self._adopt(loaded)

    def load_from(self: V, dir: str | os.PathLike[str]) -> V:
        loaded = vault.load(self.vault_filename(), dir, self.vault_format(), cls=type(self))
        return self._adopt(loaded)

    def load_from_path(self: V, path: str | os.PathLike[str]) -> V:
        loaded = vault.load_from_path(path, self.vault_format(), cls=type(self))
        return self._adopt(loaded)

    def load_or_default(self: V) -> V:
        loaded = vault.load_or_default(self.vault_filename(), None, self.vault_format(), cls=type(self))
        return self._adopt(loaded)

    # -- Save --

    def save(self) -> Path:
        return vault.save(self, self.vault_filename(), None, self.vault_format())

    def save_in(self, dir: str | os.PathLike[str]) -> Path:
        return vault.save(self, self.vault_filename(), dir, self.vault_format())

    def save_to_path(self, path: str | os.PathLike[str]) -> Path:
        return vault.save_to_path(self, path, self.vault_format())
