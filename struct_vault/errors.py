"""Exception types raised by the vault."""

from __future__ import annotations

from pathlib import Path


class VaultError(Exception):
    """Base class for every failure surfaced by struct_vault."""


class PathError(VaultError):
    """A record path could not be derived or its directory not created."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class IoError(VaultError):
    """Reading or writing a record file failed.

    The originating ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, message: str, path: Path | str) -> None:
        super().__init__(message)
        self.path = Path(path)

    @property
    def errno(self) -> int | None:
        cause = self.__cause__
        return cause.errno if isinstance(cause, OSError) else None


class EncodingError(VaultError):
    """Serializing or deserializing through a format failed."""

    def __init__(self, message: str, format: str) -> None:
        super().__init__(message)
        self.format = format

    def __str__(self) -> str:
        base = super().__str__()
        cause = self.__cause__
        return f"{base}: {cause}" if cause is not None else base
