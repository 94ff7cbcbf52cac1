"""Tests for config discovery and reading."""

from pathlib import Path

import click
import pytest

from fnrctl.config.discovery import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    find_config,
    read_config,
    resolve_config,
)


@pytest.fixture(autouse=True)
def _no_env_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[output]\nmask_ids = true\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestResolveConfig:
    def test_explicit_path(self, tmp_path: Path) -> None:
        config_file = tmp_path / "strict.toml"
        config_file.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config(str(config_file), tmp_path) == config_file

    def test_explicit_path_must_exist(self, tmp_path: Path) -> None:
        with pytest.raises(click.BadParameter, match="does not exist"):
            resolve_config(str(tmp_path / "missing.toml"), tmp_path)

    def test_falls_back_to_discovery(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert resolve_config(None, tmp_path) == config_file

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert resolve_config(None, tmp_path) is None


class TestReadConfig:
    def test_reads_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[output]\nmask_ids = true\n[policy]\nallowed_types = ["birth_number"]\n'
        )
        assert read_config(config_file) == {
            "output": {"mask_ids": True},
            "policy": {"allowed_types": ["birth_number"]},
        }

    def test_no_path(self) -> None:
        assert read_config(None) == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_config(config_file) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[policy\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_config(config_file)
