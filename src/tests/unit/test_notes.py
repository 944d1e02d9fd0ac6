"""Unit tests for the note repository."""

from unittest.mock import patch

import pytest

from noir.core.layout import DataLayout
from noir.core.notes import NoteRepository, derive_title
from noir.core.reminders import ReminderLedger
from noir.core.types import NoteStoreError


@pytest.fixture
def layout(tmp_path):
    layout = DataLayout.at(tmp_path)
    layout.ensure()
    return layout


@pytest.fixture
def ledger(layout):
    return ReminderLedger(layout.reminders_file)


@pytest.fixture
def repo(layout, ledger):
    return NoteRepository(layout, reminders=ledger)


class TestDeriveTitle:
    """Tests for derive_title()."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("# Hello World\nBody text", "Hello World"),
            ("\n\nJust text", "Just text"),
            ("", ""),
            ("   \n\t\n", ""),
            ("### Deep heading  \nmore", "Deep heading"),
            ("#NoSpace", "NoSpace"),
            ("  ## Indented\n", "Indented"),
            ("Plain first line\n# Later heading", "Plain first line"),
            ("# One line\nnext", "One line"),
            ("# Form\x0cfeed\nnext", "Form\x0cfeed"),
        ],
    )
    def test_derive_title(self, content, expected):
        """Title is the first non-blank line without heading markers."""
        assert derive_title(content) == expected


class TestNoteRepository:
    """Tests for NoteRepository CRUD."""

    def test_load_missing_returns_empty(self, repo):
        """Loading a note that doesn't exist returns ''."""
        assert repo.load("2024-05-01") == ""

    @pytest.mark.parametrize(
        "content",
        [
            "# Trip\nPacked bags",
            "",
            "windows\r\nline endings\r\n",
            "unicode: café ✓ 日本語",
        ],
    )
    def test_save_then_load_round_trips(self, repo, content):
        """Content is returned exactly as saved."""
        repo.save("2024-05-01", content)

        assert repo.load("2024-05-01") == content

    def test_save_writes_markdown_file(self, repo, layout):
        """Notes live at notes/<date>.md."""
        repo.save("2024-05-01", "hello")

        assert (layout.notes_dir / "2024-05-01.md").read_text() == "hello"

    def test_save_overwrites(self, repo):
        """A second save replaces the content entirely."""
        repo.save("2024-05-01", "first version, quite long")
        repo.save("2024-05-01", "second")

        assert repo.load("2024-05-01") == "second"

    def test_delete_removes_note(self, repo):
        """Deleted notes load as empty and leave the month listing."""
        repo.save("2024-05-01", "x")

        repo.delete("2024-05-01")

        assert repo.load("2024-05-01") == ""
        assert "2024-05-01" not in repo.list_for_month(2024, 4)

    def test_delete_missing_is_noop(self, repo):
        """Deleting a note that doesn't exist is not an error."""
        repo.delete("2024-05-01")

    def test_delete_cascades_to_reminder(self, repo, ledger):
        """Deleting a note removes its reminder."""
        repo.save("2024-05-01", "x")
        ledger.set("2024-05-01", 0)
        ledger.set("2024-05-02", 0)

        repo.delete("2024-05-01")

        assert ledger.load() == {"2024-05-02": ledger.today()}

    def test_delete_without_reminder_leaves_ledger_untouched(self, repo, ledger):
        """The ledger is not rewritten when there is nothing to remove."""
        repo.save("2024-05-01", "x")

        repo.delete("2024-05-01")

        assert not ledger.path.exists()

    def test_list_for_month_filters_by_prefix(self, repo, sample_notes):
        """Only notes in the requested 0-based month are listed."""
        for date_string, content in sample_notes.items():
            repo.save(date_string, content)

        assert sorted(repo.list_for_month(2024, 4)) == ["2024-05-01", "2024-05-17"]
        assert repo.list_for_month(2024, 5) == ["2024-06-01"]
        assert repo.list_for_month(2024, 0) == []

    def test_list_for_month_ignores_non_markdown(self, repo, layout):
        """Stray files in the notes directory are not notes."""
        repo.save("2024-05-01", "x")
        (layout.notes_dir / "2024-05-02.txt").write_text("not a note")

        assert repo.list_for_month(2024, 4) == ["2024-05-01"]

    def test_list_for_month_without_notes_dir(self, tmp_path):
        """A missing notes directory lists nothing."""
        repo = NoteRepository(DataLayout.at(tmp_path / "missing"))

        assert repo.list_for_month(2024, 4) == []

    def test_title_for(self, repo):
        """title_for derives the title or returns '' for missing notes."""
        repo.save("2024-05-01", "# Hello World\nBody text")

        assert repo.title_for("2024-05-01") == "Hello World"
        assert repo.title_for("2024-05-02") == ""

    def test_list_all_dumps_every_note(self, repo, sample_notes):
        """list_all returns every key and full content."""
        for date_string, content in sample_notes.items():
            repo.save(date_string, content)

        dumped = {n.date_string: n.content for n in repo.list_all()}

        assert dumped == sample_notes


class TestNoteRepositoryErrors:
    """I/O failures surface as NoteStoreError."""

    def test_load_io_failure_raises(self, repo, layout):
        """A note path that can't be read raises instead of returning ''."""
        layout.note_path("2024-05-01").mkdir()

        with pytest.raises(NoteStoreError, match="Failed to read note 2024-05-01"):
            repo.load("2024-05-01")

    def test_load_undecodable_note_raises(self, repo, layout):
        """A note that is not valid UTF-8 raises NoteStoreError."""
        layout.note_path("2024-05-01").write_bytes(b"# \xff\xfe bad")

        with pytest.raises(NoteStoreError, match="Failed to read note 2024-05-01"):
            repo.load("2024-05-01")

    def test_list_all_undecodable_note_raises(self, repo, layout):
        repo.save("2024-05-02", "# Fine")
        layout.note_path("2024-05-01").write_bytes(b"\xc3\x28")

        with pytest.raises(NoteStoreError):
            repo.list_all()

    def test_save_io_failure_raises(self, repo):
        """Write errors surface to the caller."""
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(NoteStoreError, match="Failed to save note"):
                repo.save("2024-05-01", "x")

    def test_delete_io_failure_raises(self, repo, layout):
        """Unlink errors surface to the caller."""
        repo.save("2024-05-01", "x")

        with patch("pathlib.Path.unlink", side_effect=PermissionError("denied")):
            with pytest.raises(NoteStoreError, match="Failed to delete note"):
                repo.delete("2024-05-01")
