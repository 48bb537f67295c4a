"""Tests for the workflow layer and file journal store."""

from datetime import date, time
from pathlib import Path
from unittest.mock import patch

import pytest

from twolog.adapters.file_journal import FileJournalStore
from twolog.config import Config, load_config
from twolog.errors import ErrorKind, TwoLogError
from twolog.workflows import add_entry, get_journal, show_entries, undo_last


@pytest.fixture
def today():
    return date(2024, 1, 1)


@pytest.fixture
def config(tmp_path):
    return Config(journal_dir=str(tmp_path))


@pytest.fixture
def note(tmp_path, today):
    return tmp_path / f"{today.isoformat()}.md"


class TestGetJournal:
    def test_uses_configured_dir(self, tmp_path):
        journal = get_journal(Config(journal_dir=str(tmp_path)))
        assert journal.journal_dir == tmp_path

    def test_expands_user_path(self):
        journal = get_journal(Config(journal_dir="~/some/journal"))
        assert journal.journal_dir == Path.home() / "some" / "journal"


class TestFileJournalStore:
    def test_path_for(self, tmp_path, today):
        assert FileJournalStore(tmp_path).path_for(today) == tmp_path / "2024-01-01.md"

    def test_read_missing(self, tmp_path, today):
        assert FileJournalStore(tmp_path).read(today) is None

    def test_write_then_read(self, tmp_path, today):
        store = FileJournalStore(tmp_path)
        store.write(today, "# 2024-01-01\n")
        assert store.path_for(today).exists()
        assert store.read(today) == "# 2024-01-01\n"

    def test_validate_missing_dir(self, tmp_path):
        store = FileJournalStore(tmp_path / "nope")
        with pytest.raises(TwoLogError) as exc_info:
            store.validate()
        assert exc_info.value.kind == ErrorKind.DIRECTORY_NOT_FOUND
        assert not (tmp_path / "nope").exists()

    def test_validate_file_instead_of_dir(self, tmp_path):
        target = tmp_path / "journal"
        target.write_text("")
        with pytest.raises(TwoLogError) as exc_info:
            FileJournalStore(target).validate(writable=False)
        assert exc_info.value.kind == ErrorKind.DIRECTORY_NOT_FOUND

    def test_validate_not_writable(self, tmp_path):
        with patch("twolog.adapters.file_journal.os.access", return_value=False):
            with pytest.raises(TwoLogError, match="not writable"):
                FileJournalStore(tmp_path).validate()
            FileJournalStore(tmp_path).validate(writable=False)

    def test_write_error(self, tmp_path, today):
        store = FileJournalStore(tmp_path)
        with patch.object(Path, "write_text", side_effect=OSError("disk full")):
            with pytest.raises(TwoLogError) as exc_info:
                store.write(today, "content")
        assert exc_info.value.kind == ErrorKind.FILE_WRITE_ERROR
        assert isinstance(exc_info.value.__cause__, OSError)


class TestAddEntry:
    def test_creates_note_from_template(self, config, today, note):
        result = add_entry(config, "A", entry_time=time(9, 30), today=today)

        assert result.created
        assert result.path == note
        assert result.entry.raw == "- 09:30 A"
        assert note.read_text() == "# 2024-01-01\n\n## Today\n- 09:30 A\n\n"

    def test_existing_blank_note_uses_template(self, config, today, note):
        note.write_text("  \n")
        result = add_entry(config, "A", entry_time=time(9, 30), today=today)
        assert result.created
        assert note.read_text().startswith("# 2024-01-01\n\n## Today\n- 09:30 A\n")

    def test_appends_to_existing_note(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Today\n- 08:00 Up\n\n## Notes\nkeep me\n")

        result = add_entry(config, "Coffee", entry_time=time(8, 15), today=today)

        assert not result.created
        assert note.read_text() == "# 2024-01-01\n\n## Today\n- 08:00 Up\n- 08:15 Coffee\n\n## Notes\nkeep me\n"
        assert [e.raw for e in result.entries] == ["- 08:00 Up", "- 08:15 Coffee"]

    @patch("twolog.workflows.current_time")
    def test_defaults_to_current_time(self, mock_now, config, today):
        mock_now.return_value = time(17, 42)
        result = add_entry(config, "Wrap up", today=today)
        assert result.entry.raw == "- 17:42 Wrap up"

    def test_custom_header(self, tmp_path, today, note):
        config = Config(journal_dir=str(tmp_path), today_header="## Log")
        add_entry(config, "A", entry_time=time(9, 0), today=today)
        assert note.read_text() == "# 2024-01-01\n\n## Log\n- 09:00 A\n\n"

    def test_header_from_unquoted_config_value(self, tmp_path, today, note, monkeypatch):
        monkeypatch.delenv("TWOLOG_TODAY_HEADER", raising=False)
        conf = tmp_path / "2log.conf"
        conf.write_text("TODAY_HEADER = ## Today\n")
        config = load_config(conf)
        config.journal_dir = str(tmp_path)
        note.write_text("# 2024-01-01\n\n## Today\n- 08:00 Up\n")

        add_entry(config, "A", entry_time=time(9, 0), today=today)

        assert note.read_text() == "# 2024-01-01\n\n## Today\n- 08:00 Up\n- 09:00 A\n"

    def test_missing_header_leaves_file_unchanged(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Notes\n")
        with pytest.raises(TwoLogError) as exc_info:
            add_entry(config, "A", entry_time=time(9, 0), today=today)
        assert exc_info.value.kind == ErrorKind.HEADER_NOT_FOUND
        assert note.read_text() == "# 2024-01-01\n\n## Notes\n"

    def test_missing_directory(self, tmp_path, today):
        config = Config(journal_dir=str(tmp_path / "missing"))
        with pytest.raises(TwoLogError) as exc_info:
            add_entry(config, "A", today=today)
        assert exc_info.value.kind == ErrorKind.DIRECTORY_NOT_FOUND

    def test_blank_message(self, config, today, note):
        with pytest.raises(TwoLogError) as exc_info:
            add_entry(config, "   ", today=today)
        assert exc_info.value.kind == ErrorKind.INVALID_ARGUMENTS
        assert not note.exists()

    def test_chronological_after_many_inserts(self, config, today):
        times = [time(14, 0), time(9, 0), time(11, 30), time(9, 0), time(0, 5)]
        for i, t in enumerate(times):
            add_entry(config, f"entry {i}", entry_time=t, today=today)

        entries = show_entries(config, today=today)
        assert [e.minutes for e in entries] == sorted(e.minutes for e in entries)
        assert [e.message for e in entries if e.format_time() == "09:00"] == ["entry 1", "entry 3"]


class TestShowEntries:
    def test_no_note(self, config, today, note):
        assert show_entries(config, today=today) == []
        assert not note.exists()

    def test_lists_in_order(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Today\n- 14:00 C\n- 9:00 A\nprose\n")
        entries = show_entries(config, today=today)
        assert [(e.format_time(), e.message) for e in entries] == [("09:00", "A"), ("14:00", "C")]

    def test_is_idempotent_and_read_only(self, config, today, note):
        content = "# 2024-01-01\n\n## Today\n- 14:00 C\n- 9:00 A\n"
        note.write_text(content)
        assert show_entries(config, today=today) == show_entries(config, today=today)
        assert note.read_text() == content

    def test_missing_header(self, config, today, note):
        note.write_text("# 2024-01-01\n\nnothing here\n")
        with pytest.raises(TwoLogError) as exc_info:
            show_entries(config, today=today)
        assert exc_info.value.kind == ErrorKind.HEADER_NOT_FOUND
        assert note.read_text() == "# 2024-01-01\n\nnothing here\n"


class TestUndoLast:
    def test_after_three_inserts(self, config, today, note):
        for t, message in [(time(9, 0), "A"), (time(11, 30), "B"), (time(14, 0), "C")]:
            add_entry(config, message, entry_time=t, today=today)

        result = undo_last(config, today=today)

        assert result.entry.raw == "- 14:00 C"
        assert result.path == note
        assert [e.format_time() for e in show_entries(config, today=today)] == ["09:00", "11:30"]

    def test_no_note(self, config, today, note):
        with pytest.raises(TwoLogError) as exc_info:
            undo_last(config, today=today)
        assert exc_info.value.kind == ErrorKind.NO_ENTRIES_TO_UNDO
        assert "No daily note" in str(exc_info.value)
        assert not note.exists()

    def test_empty_section_leaves_file_unchanged(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Today\n\n")
        with pytest.raises(TwoLogError) as exc_info:
            undo_last(config, today=today)
        assert exc_info.value.kind == ErrorKind.NO_ENTRIES_TO_UNDO
        assert "No entries to undo" in str(exc_info.value)
        assert note.read_text() == "# 2024-01-01\n\n## Today\n\n"

    def test_missing_header_leaves_file_unchanged(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Other\n- 09:00 A\n")
        with pytest.raises(TwoLogError) as exc_info:
            undo_last(config, today=today)
        assert exc_info.value.kind == ErrorKind.HEADER_NOT_FOUND
        assert note.read_text() == "# 2024-01-01\n\n## Other\n- 09:00 A\n"

    def test_round_trip_restores_entries(self, config, today, note):
        note.write_text("# 2024-01-01\n\n## Today\n- 09:00 A\nprose\n- 11:30 B\n")
        before = {e.raw for e in show_entries(config, today=today)}

        add_entry(config, "Late", entry_time=time(22, 0), today=today)
        undo_last(config, today=today)

        assert {e.raw for e in show_entries(config, today=today)} == before
