"""Journal storage interface."""

from pathlib import Path
from typing import Protocol


class JournalStore(Protocol):
    """Interface for creating journal directories and pages."""

    def ensure_dir(self, relative: Path | str = ".") -> Path:
        """Create a directory (and parents) if missing. Returns its path."""
        ...

    def create(self, relative: Path | str, content: str) -> Path:
        """Write a new file. Fails if the file already exists."""
        ...

    def exists(self, relative: Path | str) -> bool:
        """Check if a file or directory exists."""
        ...
