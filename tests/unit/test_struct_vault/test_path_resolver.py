"""Tests for path resolution – default directory, creation, naming."""

from pathlib import Path

import pytest

from struct_vault import PathError, SaveFormat, resolve, set_custom_dir
from struct_vault.path_resolver import ensure_parent, record_filename


class TestRecordFilename:
    @pytest.mark.parametrize("fmt", list(SaveFormat))
    def test_extension_appended(self, fmt):
        assert record_filename("profile", fmt) == f"profile.{fmt.value}"

    def test_dotted_name_keeps_its_dots(self):
        assert record_filename("profile.v1", SaveFormat.JSON) == "profile.v1.json"

    def test_empty_name_raises(self):
        with pytest.raises(PathError, match="must not be empty"):
            record_filename("", SaveFormat.TOML)


class TestResolve:
    def test_explicit_dir(self, tmp_path):
        path = resolve("profile", tmp_path / "data", SaveFormat.TOML)
        assert path == tmp_path / "data" / "profile.toml"
        assert path.parent.is_dir()
        assert not path.exists()

    def test_default_dir(self):
        path = resolve("profile")
        assert path == Path(".config") / "profile.toml"
        assert Path(".config").is_dir()

    def test_default_dir_is_read_at_call_time(self, tmp_path):
        first = resolve("state", fmt=SaveFormat.YAML)
        set_custom_dir(tmp_path / "custom")
        second = resolve("state", fmt=SaveFormat.YAML)
        assert first == Path(".config") / "state.yaml"
        assert second == tmp_path / "custom" / "state.yaml"

    def test_deterministic(self, tmp_path):
        assert resolve("a", tmp_path, SaveFormat.JSON) == resolve("a", tmp_path, SaveFormat.JSON)

    def test_creates_nested_dirs_idempotently(self, tmp_path):
        target = tmp_path / "x" / "y" / "z"
        resolve("rec", target)
        resolve("rec", target)
        assert target.is_dir()

    def test_without_create_leaves_fs_untouched(self, tmp_path):
        target = tmp_path / "missing"
        path = resolve("rec", target, create=False)
        assert path == target / "rec.toml"
        assert not target.exists()

    def test_file_in_the_way_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a dir")
        with pytest.raises(PathError) as exc_info:
            resolve("rec", blocker)
        assert exc_info.value.path == blocker
        assert "Failed to create directory" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_nested_under_file_raises(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a dir")
        with pytest.raises(PathError):
            resolve("rec", blocker / "sub")


class TestEnsureParent:
    def test_creates_parent(self, tmp_path):
        target = tmp_path / "out" / "nested" / "state.toml"
        ensure_parent(target)
        assert target.parent.is_dir()
        assert not target.exists()

    def test_bare_filename_is_noop(self):
        assert ensure_parent(Path("state.toml")) == Path("state.toml")
