"""Tests for initializing journals and adding entries."""

from datetime import date
from pathlib import Path

import pytest

from journal_cli.adapters.file_journal import FileJournalStore
from journal_cli.config import CONFIG_FILE_NAME, JournalConfig, load_config
from journal_cli.core.templates import BOILERPLATE_FILES
from journal_cli.errors import (
    AlreadyExists,
    ConfigNotFound,
    ConfigParseError,
    FileWriteError,
)
from journal_cli.workflows import add_article, add_entry, initialize, resolve_root


@pytest.fixture
def today():
    return date(2024, 3, 7)


def _snapshot(root: Path) -> set[Path]:
    return {p.relative_to(root) for p in root.rglob("*")}


class TestResolveRoot:
    def test_relative_name(self, tmp_path):
        assert resolve_root("demo", tmp_path) == tmp_path / "demo"

    def test_nested_name(self, tmp_path):
        assert resolve_root("a/b", tmp_path) == tmp_path / "a" / "b"

    def test_absolute_name_kept(self, tmp_path):
        target = tmp_path / "elsewhere"
        assert resolve_root(target, tmp_path / "cwd") == target

    def test_tilde_name_is_literal(self, tmp_path):
        assert resolve_root("~nosuchuser_journal", tmp_path) == tmp_path / "~nosuchuser_journal"


class TestInitialize:
    def test_creates_root_and_boilerplate(self, tmp_path):
        result = initialize("demo", tmp_path)

        root = tmp_path / "demo"
        assert result.ok
        assert result.root == root
        for name, content in BOILERPLATE_FILES.items():
            assert (root / name).read_text(encoding="utf-8") == content

    def test_writes_config_in_cwd_not_root(self, tmp_path):
        initialize("demo", tmp_path)

        assert (tmp_path / CONFIG_FILE_NAME).exists()
        assert not (tmp_path / "demo" / CONFIG_FILE_NAME).exists()
        config = load_config(tmp_path)
        assert config == JournalConfig.for_root(tmp_path / "demo")

    def test_reports_writes_in_order(self, tmp_path):
        result = initialize("demo", tmp_path)
        root = tmp_path / "demo"
        assert result.written == [root / name for name in BOILERPLATE_FILES] + [
            tmp_path / CONFIG_FILE_NAME
        ]

    def test_creates_missing_parents(self, tmp_path):
        result = initialize("journals/2024", tmp_path)
        assert result.ok
        assert (tmp_path / "journals" / "2024" / "README.md").exists()

    def test_tilde_root_created_under_cwd(self, tmp_path):
        result = initialize("~notes", tmp_path)

        assert result.ok
        assert (tmp_path / "~notes" / "README.md").is_file()
        assert load_config(tmp_path).entry_path == f"{tmp_path}/~notes/entries"

    def test_does_not_create_entries_or_articles(self, tmp_path):
        initialize("demo", tmp_path)
        assert not (tmp_path / "demo" / "entries").exists()
        assert not (tmp_path / "demo" / "articles").exists()

    def test_refuses_existing_root(self, tmp_path):
        root = tmp_path / "demo"
        root.mkdir()
        (root / "notes.md").write_text("mine")
        before = _snapshot(tmp_path)

        with pytest.raises(AlreadyExists):
            initialize("demo", tmp_path)

        assert _snapshot(tmp_path) == before
        assert (root / "notes.md").read_text() == "mine"

    def test_refuses_existing_config_for_other_root(self, tmp_path):
        (tmp_path / CONFIG_FILE_NAME).write_text("entry_path: old\n")

        with pytest.raises(AlreadyExists):
            initialize("fresh", tmp_path)

        assert not (tmp_path / "fresh").exists()
        assert (tmp_path / CONFIG_FILE_NAME).read_text() == "entry_path: old\n"

    def test_failed_file_does_not_stop_later_writes(self, tmp_path, monkeypatch):
        original_create = FileJournalStore.create

        def flaky_create(self, relative, content):
            if str(relative) == "TODO.md":
                raise FileWriteError("disk full", self.base_dir / relative)
            return original_create(self, relative, content)

        monkeypatch.setattr(FileJournalStore, "create", flaky_create)

        result = initialize("demo", tmp_path)

        root = tmp_path / "demo"
        assert not result.ok
        assert [path for path, _ in result.failures] == [root / "TODO.md"]
        assert (root / "README.md").exists()
        assert not (root / "TODO.md").exists()
        assert (root / "CHANGELOG.md").exists()
        assert (root / "CONTRIBUTING.md").exists()
        assert (tmp_path / CONFIG_FILE_NAME).exists()


class TestAddEntry:
    @pytest.fixture
    def journal(self, tmp_path):
        initialize("demo", tmp_path)
        return tmp_path

    def test_writes_rendered_entry(self, journal, today):
        path = add_entry(journal, today)

        assert path == journal / "demo" / "entries" / "2024" / "3" / "2024_3_7.md"
        content = path.read_text(encoding="utf-8")
        assert content.startswith("# 2024/03/07\n")
        assert "## Concrete Experience" in content

    def test_second_call_same_day_fails_without_truncating(self, journal, today):
        path = add_entry(journal, today)
        path.write_text("my thoughts", encoding="utf-8")

        with pytest.raises(AlreadyExists):
            add_entry(journal, today)

        assert path.read_text(encoding="utf-8") == "my thoughts"
        assert [p.name for p in path.parent.iterdir()] == ["2024_3_7.md"]

    def test_reuses_existing_month_dir(self, journal, today):
        add_entry(journal, today)
        path = add_entry(journal, date(2024, 3, 8))
        assert path.name == "2024_3_8.md"
        assert len(list(path.parent.iterdir())) == 2

    def test_template_without_token_written_as_is(self, tmp_path, today):
        config = JournalConfig(
            entry_path=str(tmp_path / "entries"),
            article_path=str(tmp_path / "articles"),
            journal_template="no date here\n",
        )
        (tmp_path / CONFIG_FILE_NAME).write_text(config.to_yaml(), encoding="utf-8")

        path = add_entry(tmp_path, today)
        assert path.read_text(encoding="utf-8") == "no date here\n"

    def test_defaults_to_utc_today(self, journal, monkeypatch):
        monkeypatch.setattr("journal_cli.workflows.today_utc", lambda: date(2024, 12, 25))
        path = add_entry(journal)
        assert path.name == "2024_12_25.md"

    def test_missing_config(self, tmp_path, today):
        with pytest.raises(ConfigNotFound):
            add_entry(tmp_path, today)

    def test_invalid_config(self, tmp_path, today):
        (tmp_path / CONFIG_FILE_NAME).write_text("entry_path: only\n")
        with pytest.raises(ConfigParseError):
            add_entry(tmp_path, today)


class TestAddArticle:
    def test_no_filesystem_change(self, tmp_path):
        initialize("demo", tmp_path)
        before = _snapshot(tmp_path)

        add_article(tmp_path)

        assert _snapshot(tmp_path) == before

    def test_missing_config(self, tmp_path):
        with pytest.raises(ConfigNotFound):
            add_article(tmp_path)
