"""Errors raised by journal operations."""

from pathlib import Path


class JournalError(Exception):
    """Base class for every failure reported to the operator."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class AlreadyExists(JournalError):
    """A journal root, config file, or entry file is already on disk."""

    pass


class ConfigNotFound(JournalError):
    """journal-cli.yaml is missing from the working directory."""

    pass


class ConfigParseError(JournalError):
    """journal-cli.yaml exists but does not match the expected schema."""

    pass


class DirectoryCreateError(JournalError):
    """A directory could not be created."""

    pass


class FileWriteError(JournalError):
    """A file could not be written."""

    pass
