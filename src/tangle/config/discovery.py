"""Locate the tangle.toml that applies to a working directory.

The nearest ``tangle.toml`` in *start* or any of its ancestors wins. A
``TANGLE_CONFIG`` environment variable pins the file instead; when it
names a file that does not exist, no config is used at all.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tangle.toml"
CONFIG_ENV_VAR = "TANGLE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
