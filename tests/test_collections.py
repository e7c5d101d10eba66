from sortini import Entries, IniDocument, NameValue, Section, Sections
from sortini.exceptions_warnings import EntityNotFound
import pytest


@pytest.fixture
def entries() -> Entries:
    return Entries([NameValue("a", "1"), NameValue("Db", "2"), NameValue("a", "3")])


class TestCollections:

    def test_case_insensitive_lookup(self, entries: Entries):
        section = Section("S", entries=entries)
        assert section["Db"] is section["db"]
        assert section.get("DB").value == "2"
        assert "db" in section

    def test_case_sensitive_lookup(self, entries: Entries):
        section = Section("S", entries=entries, comparison="case-sensitive")
        assert section["Db"].value == "2"
        assert section.get("db") is None
        assert "db" not in section
        with pytest.raises(EntityNotFound):
            section["db"]
        with pytest.raises(KeyError):
            section["db"]

    def test_first_match(self, entries: Entries):
        assert entries["A"].value == "1"
        assert entries.index_of("a") == 0
        assert entries.index_of("missing") == -1

    def test_set_replaces_first_match_in_place(self, entries: Entries):
        entries["A"] = NameValue("A", "9")
        assert [str(e) for e in entries] == ["A=9", "Db=2", "a=3"]

    def test_set_appends_missing(self, entries: Entries):
        entries["new"] = NameValue("new", "x")
        assert len(entries) == 4
        assert entries[-1].name == "new"

    def test_contains(self, entries: Entries):
        assert entries.contains("DB")
        assert not entries.contains("DB", "case-sensitive")
        assert entries.contains("Db", "case-sensitive")
        # entries themselves can still be checked
        assert entries[0] in entries

    def test_list_behaviour(self, entries: Entries):
        assert entries[1].name == "Db"
        assert [e.value for e in entries[1:]] == ["2", "3"]
        entries.append(NameValue("z", "4"))
        assert entries.get("Z").value == "4"

    def test_sections(self):
        document = IniDocument()
        first = document.add_section("[Main]")
        document.add_section(Section("main"))
        assert isinstance(document.sections, Sections)
        assert document["MAIN"] is first
        assert "main" in document
        assert document.get("other", "default") == "default"

        replacement = Section("Main")
        document["main"] = replacement
        assert document.sections[0] is replacement
        assert len(document.sections) == 2
        assert list(document) == document.sections
