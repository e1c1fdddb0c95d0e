"""Locate ``shapeguard.toml``.

``SHAPEGUARD_CONFIG`` names the file outright; otherwise the nearest
``shapeguard.toml`` in the start directory or one of its ancestors wins.
``--config`` bypasses discovery entirely (see ``ShapeguardSettings.from_cli``).
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "shapeguard.toml"
CONFIG_ENV_VAR = "SHAPEGUARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None.

    A ``SHAPEGUARD_CONFIG`` pointing at a missing file disables discovery
    rather than falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
