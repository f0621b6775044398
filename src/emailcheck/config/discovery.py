"""Config file discovery.

Looks for ``emailcheck.toml`` in the start directory and then each
parent, the way git finds ``.git/``.  ``EMAILCHECK_CONFIG`` short-circuits
the search; ``--config`` bypasses discovery entirely (see settings).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "emailcheck.toml"
CONFIG_ENV_VAR = "EMAILCHECK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest emailcheck.toml at or above *start* (default: cwd).

    When EMAILCHECK_CONFIG is set, only that path is considered; a
    dangling value yields None rather than falling back to the search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
