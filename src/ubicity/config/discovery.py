"""Config file discovery.

Walk-up finder locates ubicity.toml, similar to how git finds .git/.
The UBICITY_CONFIG env var pins an explicit file instead.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "ubicity.toml"
CONFIG_ENV_VAR = "UBICITY_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for ubicity.toml.

    When UBICITY_CONFIG is set it wins outright: its file is returned if
    it exists, otherwise None (no walk-up fallback).
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
