"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``HOMESITE_*`` prefix
  3. TOML file: ``homesite.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`homesite.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from homesite.config.discovery import find_config
from homesite.config.models import ContentConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``homesite.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class HomesiteSettings(BaseSettings):
    """Unified settings for the homesite CLI.

    Attributes:
        content_root: Directory content paths are resolved against (parent
            of ``homesite.toml``, or CWD if no config found).
        config_path: The config file in use, or None.
        disable_filter: Include hidden (``_``-prefixed) documents in
            listings. Meant for local previews of unpublished content.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HOMESITE_",
        "env_nested_delimiter": "__",
    }

    # --- Resolved path (not in TOML, derived from config location) ---
    content_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    disable_filter: bool = False

    # --- TOML sections ---
    content: ContentConfig = Field(default_factory=ContentConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        content_root: Path | None = None,
        **cli_flags: Any,
    ) -> HomesiteSettings:
        """Construct settings from CLI invocation.

        Discovers ``homesite.toml`` via walk-up (or explicit *config_path*),
        resolves *content_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides. Flags passed as
        None are dropped so env vars and TOML values still apply.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(content_root)

        resolved_root = content_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                content_root=resolved_root,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None

    # --- Resolved content locations ---

    def _resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.content_root / path

    @property
    def projects_dir(self) -> Path:
        return self._resolve(self.content.projects_dir)

    @property
    def wishlist_dir(self) -> Path:
        return self._resolve(self.content.wishlist_dir)

    @property
    def resume_file(self) -> Path:
        return self._resolve(self.content.resume_file)
