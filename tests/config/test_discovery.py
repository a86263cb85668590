"""Tests for packdec.toml discovery."""

from pathlib import Path

import pytest

from packdec.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        (tmp_path / "packdec.toml").write_text("")
        assert find_config(tmp_path) == (tmp_path / "packdec.toml").resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        (tmp_path / "packdec.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == (tmp_path / "packdec.toml").resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "elsewhere.toml"
        target.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(target))
        assert find_config(tmp_path) == target

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None

    def test_none_when_absent(self, tmp_path: Path) -> None:
        nested = tmp_path / "empty"
        nested.mkdir()
        found = find_config(nested)
        assert found is None or tmp_path not in found.parents
