"""File existence oracles queried by the linters."""

import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class FileExistenceOracle(Protocol):
    """Answers whether a path exists. Must be safe for concurrent reads."""

    def exists(self, path: Path) -> bool:
        ...


class FileSystemOracle:
    """Oracle backed by the local filesystem.

    Relative paths are resolved against ``root`` when one is given. Any
    ``OSError`` raised while querying the filesystem is reported as absence.
    """

    def __init__(self, root: Path | None = None):
        self.root = Path(root) if root is not None else None

    def exists(self, path: Path) -> bool:
        path = Path(path)
        if self.root is not None and not path.is_absolute():
            path = self.root / path
        try:
            return path.exists()
        except OSError as e:
            logger.debug(f"Treating {path} as missing: {e}")
            return False
