"""Locate ``homesite.toml`` for a content tree.

The nearest ``homesite.toml`` at or above the starting directory wins.
``HOMESITE_CONFIG`` names a file directly and disables the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "homesite.toml"
CONFIG_ENV_VAR = "HOMESITE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        explicit = Path(override)
        return explicit if explicit.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
