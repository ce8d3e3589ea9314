"""File-based journal storage adapter."""

import logging
from pathlib import Path

from ..errors import AlreadyExists, DirectoryCreateError, FileWriteError

logger = logging.getLogger(__name__)


class FileJournalStore:
    """
    File-based journal storage.

    Implements JournalStore protocol. Paths are resolved against base_dir;
    files are only ever created, never overwritten.
    """

    def __init__(self, base_dir: Path | str):
        self.base_dir = Path(base_dir)

    def _path(self, relative: Path | str) -> Path:
        return self.base_dir / relative

    def ensure_dir(self, relative: Path | str = ".") -> Path:
        """Create a directory (and parents) if missing. Returns its path."""
        path = self._path(relative)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(f"create_dir_all: {path}: {e}", path) from e
        return path

    def create(self, relative: Path | str, content: str) -> Path:
        """Write a new file. Raises AlreadyExists rather than truncating."""
        path = self._path(relative)
        try:
            # "x" fails atomically if the file exists, so concurrent writers get one winner.
            with open(path, "x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            raise AlreadyExists(f"{path}: file already exists", path) from e
        except OSError as e:
            raise FileWriteError(f"{path}: {e}", path) from e
        logger.info(f"Created {path}")
        return path

    def exists(self, relative: Path | str) -> bool:
        """Check if a file or directory exists."""
        return self._path(relative).exists()
