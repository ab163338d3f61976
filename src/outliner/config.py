"""Configuration constants for the outline editor."""

import os
from pathlib import Path

# Directory holding the outline cache. First directory which is found is used.
DATA_DIRECTORIES: list[Path] = [
    Path("~/.local/share/outliner").expanduser(),
    Path("~/.outliner").expanduser(),
]

# Overrides DATA_DIRECTORIES when set.
DATA_DIR_ENV: str = "OUTLINER_DATA_DIR"

CACHE_FILENAME: str = "outline.json"


def resolve_data_directory() -> Path:
    """Return the data directory: env override, first existing candidate, or the default."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    for candidate in DATA_DIRECTORIES:
        if candidate.is_dir():
            return candidate
    return DATA_DIRECTORIES[0]
