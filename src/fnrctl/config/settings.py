"""FnrSettings — CLI flags, env vars and fnrctl.toml merged into one object.

Precedence, highest first:
  1. Init kwargs   — CLI flags passed by Click
  2. Env vars      — ``FNRCTL_*`` prefix, ``__`` between section and key
  3. TOML file     — see :mod:`fnrctl.config.discovery`
  4. Code defaults — baked into :mod:`fnrctl.config.models`

Anything that fails validation surfaces as a :class:`click.ClickException`
naming the offending keys.
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
import pydantic
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from fnrctl.config.discovery import read_config, resolve_config
from fnrctl.config.models import OutputConfig, PolicyConfig

# Parsed fnrctl.toml for the FnrSettings currently being built.
_toml_data: ContextVar[dict[str, Any] | None] = ContextVar("fnrctl_toml_data", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Hand already-parsed fnrctl.toml sections to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], data: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._data = data

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


class FnrSettings(BaseSettings):
    """Resolved settings for one fnrctl run.

    Attributes:
        config_path: The TOML file that was loaded, or None.
        output: ``[output]`` section, masking of ids in results.
        policy: ``[policy]`` section, which identifier types are accepted.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "FNRCTL_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    output: OutputConfig = Field(default_factory=OutputConfig)
    policy: PolicyConfig = Field(default_factory=PolicyConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, _toml_data.get() or {}),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> FnrSettings:
        """Build settings for one CLI invocation.

        Uses *config_path* when given, otherwise discovers fnrctl.toml
        from *search_root*. *cli_flags* override every other source.

        Raises:
            click.BadParameter: *config_path* does not name a file.
            click.ClickException: the config is not valid TOML, or holds
                values the section models reject.
        """
        toml_path = resolve_config(config_path, search_root)
        token = _toml_data.set(read_config(toml_path))
        try:
            return cls(config_path=toml_path, **cli_flags)
        except pydantic.ValidationError as exc:
            source = toml_path or f"{cls.model_config['env_prefix']}* environment"
            msg = f"Invalid configuration in {source}: {_describe(exc)}"
            raise click.ClickException(msg) from exc
        finally:
            _toml_data.reset(token)


def _describe(exc: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
