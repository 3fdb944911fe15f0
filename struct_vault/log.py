"""
struct_vault - Logging Module
Provides centralized logging functionality for the vault.
"""
import sys
from datetime import datetime
from pathlib import Path

from . import conf

# =============================================================================
# CONFIGURATION
# =============================================================================

LOG = False  # Set to True to enable logging
LOG_TO_STDERR = True
LOG_FILE: Path | None = conf.LOG_FILE
first_line = True

# =============================================================================
# LOGGING
# =============================================================================


def configure_log(enabled: bool = True, log_file: Path | str | None = conf.LOG_FILE,
                  to_stderr: bool = True) -> None:
    """Switch vault logging on or off and choose where lines go."""
    global LOG, LOG_FILE, LOG_TO_STDERR, first_line
    LOG = enabled
    LOG_FILE = Path(log_file) if log_file is not None else None
    LOG_TO_STDERR = to_stderr
    first_line = True


def vault_log(message: str) -> None:
    """Append log message to the vault log if LOG is enabled."""
    global first_line
    if not LOG:
        return
    if first_line:
        first_line = False
        if LOG_FILE is not None:
            LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        vault_log("--- New struct_vault Session ---")
    timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    log_line = f"[{timestamp}] {message}\n"
    if LOG_TO_STDERR:
        sys.stderr.write(log_line)
    if LOG_FILE is not None:
        with open(LOG_FILE, "a", encoding="utf-8") as f:
            f.write(log_line)


def vault_log_print() -> None:
    """Print the contents of the log file to stdout."""
    if LOG_FILE is not None and LOG_FILE.exists():
        log_contents = LOG_FILE.read_text(encoding="utf-8")
        if log_contents:
            print(log_contents, end="")
        else:
            print("[struct_vault log is empty]")
    else:
        print("[struct_vault log file does not exist]")


def vault_log_clear() -> None:
    """Delete the log file."""
    if LOG_FILE is not None and LOG_FILE.exists():
        LOG_FILE.unlink()
