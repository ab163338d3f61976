"""JSON file cache holding the latest outline snapshot."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from outliner.config import CACHE_FILENAME


class SnapshotCache:
    """Keep the outline snapshot in a single JSON file.

    - Do not rewrite the file if contents are the same.
    - In dry-run mode, only log what would be written.
    """

    def __init__(self, datadir: str | Path, *, dry_run: bool = False) -> None:
        self.datadir = Path(datadir).expanduser().resolve()
        self.dry_run = dry_run
        self.path = self.datadir / CACHE_FILENAME

        if not dry_run and not self.datadir.is_dir():
            msg = f"Data directory {str(self.datadir)!r} not found"
            raise ValueError(msg)

        logger.debug("Cache ready, path {!r}, dry_run {!r}", str(self.path), dry_run)
        self.num_same = 0
        self.num_written = 0

    def save(self, snapshot: dict[str, Any]) -> None:
        """Write the snapshot, skipping the write when nothing changed."""
        contents = json.dumps(snapshot, sort_keys=True, indent=4) + "\n"

        action = "create"
        try:
            if self.path.read_text(encoding="utf-8") == contents:
                self.num_same += 1
                return
            action = "update"
        except (FileNotFoundError, UnicodeDecodeError):
            pass

        if self.dry_run:
            logger.info("dry-run: would {} {!r}", action, str(self.path))
            return
        logger.debug("Writing ({}) {!r}", action, str(self.path))
        self.path.write_text(contents, encoding="utf-8")
        self.num_written += 1

    def try_read_json(self) -> Any | None:
        """Try to read the cached snapshot.

        Returns:
            Json contents if the file is found, None if it is not.
            Raises on all other errors.
        """
        try:
            contents = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        rj = json.loads(contents)
        # A stored null would be ambiguous with "file not found".
        if rj is None:
            msg = f"try_read_json found None object in {str(self.path)!r}"
            raise ValueError(msg)
        return rj
