"""Journal operations shared by the CLI.

Each operation takes the working directory (and, for entries, the date)
explicitly so it can run without touching process-wide state.
"""

import logging
import os
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path

from .adapters.file_journal import FileJournalStore
from .config import CONFIG_FILE_NAME, JournalConfig, config_path, load_config
from .core.entry import entry_dir, entry_filename, render_entry, today_utc
from .core.templates import BOILERPLATE_FILES
from .errors import AlreadyExists, JournalError
from .ports.journal_store import JournalStore

logger = logging.getLogger(__name__)


@dataclass
class InitResult:
    """Outcome of initializing a journal.

    Writes after the root directory are attempted independently, so a
    partial result (some files written, some failed) is possible.
    """

    root: Path
    written: list[Path] = field(default_factory=list)
    failures: list[tuple[Path, JournalError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


def resolve_root(root_name: str | Path, cwd: Path) -> Path:
    """Absolute journal root for a name given relative to cwd."""
    return Path(os.path.abspath(Path(cwd) / root_name))


def initialize(root_name: str | Path, cwd: Path) -> InitResult:
    """Create a journal root with boilerplate files and write journal-cli.yaml into cwd.

    Raises AlreadyExists, without touching the filesystem, if the root
    directory or cwd/journal-cli.yaml already exists. Raises
    DirectoryCreateError if the root cannot be created. Failures writing
    individual files are collected in the result instead of aborting.
    """
    cwd = Path(cwd)
    root = resolve_root(root_name, cwd)

    cwd_store: JournalStore = FileJournalStore(cwd)
    if cwd_store.exists(root) or cwd_store.exists(CONFIG_FILE_NAME):
        raise AlreadyExists(f"{root_name} or {CONFIG_FILE_NAME} already exists", root)

    store: JournalStore = FileJournalStore(root)
    store.ensure_dir()
    logger.info(f"Created journal directory {root}")

    result = InitResult(root=root)
    for name, content in BOILERPLATE_FILES.items():
        try:
            result.written.append(store.create(name, content))
        except JournalError as e:
            logger.warning(f"Failed to write {root / name}: {e}")
            result.failures.append((root / name, e))

    config = JournalConfig.for_root(root)
    try:
        result.written.append(cwd_store.create(CONFIG_FILE_NAME, config.to_yaml()))
    except JournalError as e:
        logger.warning(f"Failed to write {config_path(cwd)}: {e}")
        result.failures.append((config_path(cwd), e))

    return result


def add_entry(cwd: Path, today: date | None = None) -> Path:
    """Write the entry for today (UTC unless given) and return its path.

    Raises ConfigNotFound / ConfigParseError for a missing or invalid
    journal-cli.yaml and AlreadyExists if the day's entry is already there.
    """
    config = load_config(cwd)
    today = today or today_utc()

    target_dir = entry_dir(config.entry_path, today)
    store: JournalStore = FileJournalStore(target_dir)
    store.ensure_dir()

    content = render_entry(config.journal_template, today)
    return store.create(entry_filename(today), content)


def add_article(cwd: Path) -> None:
    """Accept an article request. Article pages are not generated yet.

    The config is still loaded so a missing journal is reported the same
    way as for entries.
    """
    load_config(cwd)
    logger.debug(f"add article: nothing to do in {cwd}")
