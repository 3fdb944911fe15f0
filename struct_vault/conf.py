"""struct_vault - Central path and encoding configuration."""

from pathlib import Path

# =============================================================================
# STORAGE
# =============================================================================

# Fallback directory for records saved without an explicit directory.
DEFAULT_SAVE_DIR = ".config"

ENCODING = "utf-8"
JSON_INDENT = 2

# =============================================================================
# LOGGING
# =============================================================================

USER_HOME = Path.home()
VAULT_HOME = USER_HOME / ".struct_vault"

LOG_FILE = VAULT_HOME / "vault.log"
