"""Tests for loading and saving the authors file."""
import tempfile
import shutil
from pathlib import Path

from authortool.author_file import AuthorFile


class TestAuthorFile:
    """Test suite for AuthorFile."""

    def setup_method(self):
        """Create a temporary directory for each test."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.path = self.temp_dir / "author.txt"

    def teardown_method(self):
        """Clean up temporary directory."""
        shutil.rmtree(self.temp_dir)

    def test_load_missing_file_is_empty(self):
        """Test that a missing file is a valid, empty list."""
        assert AuthorFile(self.path).load() == set()
        assert not self.path.exists()

    def test_load_splits_on_any_whitespace(self):
        """Test tokens separated by spaces, tabs and newlines."""
        self.path.write_text("alice  bob\n\tcarol\n\n dave ")

        assert AuthorFile(self.path).load() == {"alice", "bob", "carol", "dave"}

    def test_load_collapses_duplicates(self):
        """Test duplicate tokens become one entry."""
        self.path.write_text("alice bob alice\nbob\n")

        assert AuthorFile(self.path).load() == {"alice", "bob"}

    def test_load_is_case_sensitive(self):
        """Test that identifiers differing in case are distinct."""
        self.path.write_text("Alice alice")

        assert AuthorFile(self.path).load() == {"Alice", "alice"}

    def test_save_sorted_single_line(self):
        """Test output is sorted, space-joined and newline-terminated."""
        AuthorFile(self.path).save(["carol", "alice", "bob"])

        assert self.path.read_text() == "alice bob carol\n"

    def test_save_empty_writes_empty_file(self):
        """Test that an empty set produces a zero-byte file."""
        self.path.write_text("alice bob\n")

        AuthorFile(self.path).save(set())

        assert self.path.exists()
        assert self.path.read_text() == ""

    def test_save_overwrites(self):
        """Test save replaces the whole file rather than appending."""
        self.path.write_text("alice bob carol\n")

        AuthorFile(self.path).save({"dave"})

        assert self.path.read_text() == "dave\n"

    def test_save_creates_parent_directories(self):
        """Test missing parent directories are created."""
        nested = self.temp_dir / "deeply" / "nested" / "author.txt"

        AuthorFile(nested).save({"alice"})

        assert nested.read_text() == "alice\n"

    def test_round_trip(self):
        """Test writing then reading returns the same set."""
        author_file = AuthorFile(self.path)
        author_file.save(["c", "a", "b"])

        assert author_file.load() == {"a", "b", "c"}

    def test_format(self):
        """Test rendering without touching the disk."""
        assert AuthorFile.format([]) == ""
        assert AuthorFile.format(["b", "a", "b"]) == "a b\n"

