"""Tests for pybig comparators."""

from pybig.comparators import (
    SORTS,
    FileRecord,
    collation_key,
    compare_extension,
    compare_name,
    compare_none,
    compare_size,
    descending,
    extension,
)
from pybig.report import sort_records


def make_records():
    return [
        FileRecord("./b/zeta.txt", 300),
        FileRecord("./a/Alpha.py", 100),
        FileRecord("./c/éclair.md", 500),
        FileRecord("./Makefile", 200),
        FileRecord("./d/beta.JSON", 400),
    ]


class TestExtension:
    """Test extension function."""

    def test_last_dot(self):
        assert extension("./docs/report.tar.gz") == "gz"

    def test_no_dot_uses_whole_name(self):
        assert extension("./build/Makefile") == "Makefile"

    def test_dot_in_directory_is_ignored(self):
        assert extension("./v1.2/README") == "README"

    def test_hidden_file(self):
        assert extension("./.bashrc") == "bashrc"


class TestComparators:
    """Test the individual comparators."""

    def test_compare_none_is_zero(self):
        a, b = FileRecord("a", 1), FileRecord("b", 2)
        assert compare_none(a, b) == 0
        assert compare_none(b, a) == 0

    def test_compare_size_sign(self):
        small, big = FileRecord("a", 1), FileRecord("b", 2000)
        assert compare_size(small, big) == -1
        assert compare_size(big, small) == 1
        assert compare_size(small, FileRecord("c", 1)) == 0

    def test_compare_name_ignores_case_and_accents(self):
        assert compare_name(FileRecord("eclair", 1), FileRecord("Éclair", 1)) != 0
        assert collation_key("Éclair")[0] == collation_key("eclair")[0]
        assert compare_name(FileRecord("apple", 1), FileRecord("Banana", 1)) == -1

    def test_compare_name_equal(self):
        assert compare_name(FileRecord("same", 1), FileRecord("same", 2)) == 0

    def test_descending_negates(self):
        small, big = FileRecord("a", 1), FileRecord("b", 2)
        assert descending(compare_size)(small, big) == 1
        assert descending(compare_size)(big, small) == -1

    def test_sorts_table(self):
        assert set(SORTS) == {"alpha", "exten", "size"}
        assert SORTS["alpha"] is compare_name
        assert SORTS["exten"] is compare_extension


class TestSortRecords:
    """Test sorting against reference sorts with the same keys."""

    def test_alpha(self):
        records = make_records()
        expected = sorted(records, key=lambda r: collation_key(r.name))
        sort_records(records, SORTS["alpha"])
        assert records == expected

    def test_exten(self):
        records = make_records()
        expected = sorted(records, key=lambda r: collation_key(extension(r.name)))
        sort_records(records, SORTS["exten"])
        assert records == expected
        assert [extension(r.name) for r in records] == ["JSON", "Makefile", "md", "py", "txt"]

    def test_size_is_largest_first(self):
        records = make_records()
        expected = sorted(records, key=lambda r: r.size, reverse=True)
        sort_records(records, SORTS["size"])
        assert records == expected

    def test_none_keeps_order(self):
        records = make_records()
        original = list(records)
        sort_records(records, compare_none)
        assert records == original
