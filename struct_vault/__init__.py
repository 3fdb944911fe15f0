"""Persist structured values as JSON, YAML or TOML files."""

from .conf import DEFAULT_SAVE_DIR
from .errors import EncodingError, IoError, PathError, VaultError
from .path_resolver import resolve
from .save_format import SaveFormat, deserialize, extension_of, serialize
from .struct_vault import StructVault
from .vault import load, load_from_path, load_or_default, save, save_to_path
from .vault_config import VaultConfig
from .vault_dir import get_default_dir, reset_default_dir, set_custom_dir

__all__ = [
    "DEFAULT_SAVE_DIR",
    "EncodingError",
    "IoError",
    "PathError",
    "SaveFormat",
    "StructVault",
    "VaultConfig",
    "VaultError",
    "deserialize",
    "extension_of",
    "get_default_dir",
    "load",
    "load_from_path",
    "load_or_default",
    "reset_default_dir",
    "resolve",
    "save",
    "save_to_path",
    "serialize",
    "set_custom_dir",
]
