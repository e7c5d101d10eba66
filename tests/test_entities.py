from sortini import (
    Comment,
    EntryType,
    NameValue,
    PlainText,
    Section,
    SectionName,
)
from sortini.entities import entry_from_string
from sortini.exceptions_warnings import ExtractionError
import pytest


class TestEntities:

    @pytest.mark.parametrize(
        "line,entry_type,name,value",
        [
            ("key=value", EntryType.NAME_VALUE, "key", "value"),
            (" a = b = c ", EntryType.NAME_VALUE, "a", "b = c"),
            ("=value", EntryType.NAME_VALUE, "", "value"),
            ("key=", EntryType.NAME_VALUE, "key", ""),
            (";key=value", EntryType.COMMENT, "key=value", ""),
            ("# note", EntryType.COMMENT, "note", ""),
            ("some text", EntryType.PLAIN_TEXT, "", "some text"),
        ],
    )
    def test_entry_from_string(self, line, entry_type, name, value):
        entry = entry_from_string(line, comments="; above\n")
        assert entry.type is entry_type
        assert (entry.name, entry.value) == (name, value)
        assert entry.comments == "; above"

    def test_from_string_rejects_other_shapes(self):
        with pytest.raises(ExtractionError):
            NameValue.from_string("no delimiter")
        with pytest.raises(ExtractionError):
            Comment.from_string("key=value")
        with pytest.raises(ExtractionError):
            PlainText.from_string("key=value")

    def test_fields_are_trimmed(self):
        entry = NameValue(" key ", None, None)
        assert (entry.name, entry.value, entry.comments) == ("key", "", "")
        entry.value = "  new  "
        assert entry.value == "new"
        comment = Comment()
        comment.text = ";; disabled "
        assert comment.text == "disabled"

    def test_string_forms(self):
        assert str(NameValue("k", "v")) == "k=v"
        assert NameValue("k", "v").to_string(expand=True) == "k = v"
        assert str(Comment("off")) == ";off"
        assert str(PlainText(" text ")) == "text"

    def test_equality(self):
        assert NameValue("k", "v") == NameValue("k", "v")
        assert NameValue("k", "v") != NameValue("k", "v", "; c")
        assert Comment("x") != PlainText("x")

    @pytest.mark.parametrize(
        "name,result",
        [
            ("[Foo]", "Foo"),
            ("Foo", "Foo"),
            (" [ Foo ] ", "Foo"),
            ("[Foo", "Foo"),
            (None, ""),
        ],
    )
    def test_section_name(self, name, result):
        assert SectionName(name) == result
        section = Section(name)
        assert section.name == result
        section.name = section.name
        assert section.name == result

    def test_section_string(self):
        assert str(Section("[Foo]")) == "[Foo]"
