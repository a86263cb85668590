"""Locate packdec.toml.

``PACKDEC_CONFIG`` names the file outright; otherwise the search walks up
from the starting directory the way git looks for ``.git/``.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "packdec.toml"
CONFIG_ENV_VAR = "PACKDEC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the packdec.toml in effect for *start* (default: cwd), or None.

    A ``PACKDEC_CONFIG`` pointing at a missing file disables the walk-up.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
