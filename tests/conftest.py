"""Pytest fixtures for vault testing."""

import pytest

from struct_vault import log, reset_default_dir


@pytest.fixture(autouse=True)
def isolated_vault(tmp_path, monkeypatch):
    """Run each test from an empty directory with a fresh default directory."""
    monkeypatch.chdir(tmp_path)
    reset_default_dir()
    yield tmp_path
    reset_default_dir()


@pytest.fixture
def vault_log_file(tmp_path):
    """Enable vault logging into a temporary file for one test."""
    log_file = tmp_path / "logs" / "vault.log"
    log.configure_log(enabled=True, log_file=log_file, to_stderr=False)
    yield log_file
    log.vault_log_print()
    log.vault_log_clear()
    log.configure_log(enabled=False)
