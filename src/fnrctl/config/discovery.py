"""Locating and reading fnrctl.toml.

Lookup order: an explicit ``--config`` path, then the ``FNRCTL_CONFIG``
environment variable, then a walk up from the working directory the way
git looks for ``.git``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "fnrctl.toml"
CONFIG_ENV_VAR = "FNRCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the fnrctl.toml that applies to *start* (default: cwd), if any.

    ``FNRCTL_CONFIG`` short-circuits the walk. When it names a missing
    file, no config is used at all.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config(explicit: str | None, search_root: Path | None = None) -> Path | None:
    """Pick the config file for one invocation.

    An explicit path has to exist. A file that is merely not found by
    discovery means the defaults apply.

    Raises:
        click.BadParameter: *explicit* does not name a file.
    """
    if not explicit:
        return find_config(search_root)
    path = Path(explicit)
    if not path.is_file():
        msg = f"{explicit} does not exist."
        raise click.BadParameter(msg, param_hint="'-c' / '--config'")
    return path


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* as TOML. No path gives an empty mapping.

    Raises:
        click.ClickException: the file is not valid TOML.
    """
    if path is None:
        return {}
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
