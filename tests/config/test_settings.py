"""Tests for HomesiteSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from homesite.config.settings import HomesiteSettings


class TestHomesiteSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        assert settings.content_root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.disable_filter is False
        assert settings.projects_dir == tmp_path / "projects"
        assert settings.wishlist_dir == tmp_path / "posts" / "wishlist"
        assert settings.resume_file == tmp_path / "posts" / "resume.yaml"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_none_flags_ignored(self, tmp_path: Path) -> None:
        settings = HomesiteSettings.from_cli(content_root=tmp_path, verbose=None)
        assert settings.verbose is False


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "homesite.toml").write_text(
            'disable_filter = true\n[content]\nprojects_dir = "work"\n'
        )
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        assert settings.disable_filter is True
        assert settings.projects_dir == tmp_path / "work"
        assert settings.wishlist_dir == tmp_path / "posts" / "wishlist"  # default preserved

    def test_absolute_paths_kept(self, tmp_path: Path) -> None:
        elsewhere = tmp_path / "elsewhere"
        (tmp_path / "homesite.toml").write_text(f'[content]\nprojects_dir = "{elsewhere}"\n')
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        assert settings.projects_dir == elsewhere

    def test_content_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "homesite.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = HomesiteSettings.from_cli()
        assert settings.content_root == tmp_path.resolve()
        assert settings.config_path == (tmp_path / "homesite.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "site.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[content]\nwishlist_dir = "wants"\n')
        settings = HomesiteSettings.from_cli(config_path=str(custom), content_root=tmp_path)
        assert settings.wishlist_dir == tmp_path / "wants"
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "homesite.toml").write_text("this is = = not toml")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            HomesiteSettings.from_cli(content_root=tmp_path)


class TestPriority:
    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "homesite.toml").write_text("disable_filter = false\n")
        monkeypatch.setenv("HOMESITE_DISABLE_FILTER", "1")
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        assert settings.disable_filter is True

    def test_cli_beats_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOMESITE_DISABLE_FILTER", "0")
        settings = HomesiteSettings.from_cli(content_root=tmp_path, disable_filter=True)
        assert settings.disable_filter is True

    def test_nested_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOMESITE_CONTENT__PROJECTS_DIR", "env-projects")
        settings = HomesiteSettings.from_cli(content_root=tmp_path)
        assert settings.projects_dir == tmp_path / "env-projects"
