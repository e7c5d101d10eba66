"""Ini entities are either a section name, a comment, an option (name/value pair)
or plain text."""

from enum import Enum
from typing import Self
from .exceptions_warnings import ExtractionError
from .globals import (
    COMMENT_MARKERS,
    OPTION_DELIMITER,
    SECTION_NAME_OPENING,
    SECTION_NAME_CLOSING,
)
from .utils import _trim


class EntryType(Enum):
    """Kind of an entry within a section."""

    COMMENT = "Comment"
    NAME_VALUE = "NameValue"
    PLAIN_TEXT = "PlainText"


class _Entry:
    """An entry of a section, together with the comment lines found directly
    above it."""

    type: EntryType

    def __init__(self, comments: str | None = None) -> None:
        self.comments = comments

    @property
    def comments(self) -> str:
        """Raw comment lines preceding the entry, trimmed as one block."""
        return self._comments

    @comments.setter
    def comments(self, value: str | None) -> None:
        self._comments = _trim(value)

    @property
    def name(self) -> str:
        raise NotImplementedError

    @property
    def value(self) -> str:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        return (
            type(self) is type(other)
            and isinstance(other, _Entry)
            and (self.name, self.value, self.comments)
            == (other.name, other.value, other.comments)
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, value={self.value!r},"
            f" comments={self.comments!r})"
        )


class Comment(_Entry):
    """A commented-out line, e.g. a disabled option. Its content is never interpreted."""

    type = EntryType.COMMENT

    def __init__(self, text: str | None = None, comments: str | None = None) -> None:
        """
        Args:
            text (str | None, optional): Content of the line with all comment
                markers removed. Defaults to None.
            comments (str | None, optional): Comment lines above. Defaults to None.
        """
        super().__init__(comments)
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        text = _trim(value)
        while text.startswith(COMMENT_MARKERS):
            text = text[1:].strip()
        self._text = text

    @property
    def name(self) -> str:
        return self.text

    @property
    def value(self) -> str:
        return ""

    def __str__(self) -> str:
        return f"{COMMENT_MARKERS[0]}{self.text}"

    @classmethod
    def from_string(cls, string: str, comments: str | None = None) -> Self:
        """Create a Comment from a line that starts with a comment marker.

        Args:
            string (str): The line.
            comments (str | None, optional): Comment lines above. Defaults to None.

        Returns:
            Self: The new Comment.
        """
        if not string.strip().startswith(COMMENT_MARKERS):
            raise ExtractionError("Comment could not be extracted.")
        return cls(string, comments)


class NameValue(_Entry):
    """An option, i.e. a name/value pair."""

    type = EntryType.NAME_VALUE

    def __init__(
        self,
        name: str | None = None,
        value: str | None = None,
        comments: str | None = None,
    ) -> None:
        super().__init__(comments)
        self.name = name
        self.value = value

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        self._name = _trim(value)

    @property
    def value(self) -> str:
        return self._value

    @value.setter
    def value(self, value: str | None) -> None:
        self._value = _trim(value)

    def to_string(self, expand: bool = False) -> str:
        """Convert the option into an ini line.

        Args:
            expand (bool, optional): Whether to put spaces around the delimiter.
                Defaults to False.

        Returns:
            str: The ini line.
        """
        delimiter = f" {OPTION_DELIMITER} " if expand else OPTION_DELIMITER
        return f"{self.name}{delimiter}{self.value}"

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def from_string(cls, string: str, comments: str | None = None) -> Self:
        """Create an option from a line, splitting at the first delimiter.

        Args:
            string (str): The line that contains the option name and value.
            comments (str | None, optional): Comment lines above. Defaults to None.

        Returns:
            Self: A new option with the extracted name and value.
        """
        name, delimiter, value = string.partition(OPTION_DELIMITER)
        if not delimiter:
            raise ExtractionError("Option could not be extracted.")
        return cls(name, value, comments)


class PlainText(_Entry):
    """A line that could not be interpreted."""

    type = EntryType.PLAIN_TEXT

    def __init__(self, text: str | None = None, comments: str | None = None) -> None:
        super().__init__(comments)
        self.text = text

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str | None) -> None:
        self._text = _trim(value)

    @property
    def name(self) -> str:
        return ""

    @property
    def value(self) -> str:
        return self.text

    def __str__(self) -> str:
        return self.text

    @classmethod
    def from_string(cls, string: str, comments: str | None = None) -> Self:
        if OPTION_DELIMITER in string:
            raise ExtractionError("Line is an option, not plain text.")
        return cls(string, comments)


type Entry = Comment | NameValue | PlainText
"""Any entry of a section."""


def entry_from_string(string: str, comments: str | None = None) -> Entry:
    """Create the fitting entry for a line. Never fails: a line that is neither a
    comment nor an option becomes plain text.

    Args:
        string (str): The line.
        comments (str | None, optional): Comment lines above. Defaults to None.

    Returns:
        Entry: The new entry.
    """
    for entry_type in (Comment, NameValue):
        try:
            return entry_type.from_string(string, comments)
        except ExtractionError:
            continue
    return PlainText.from_string(string, comments)


class SectionName(str):
    """A configuration section's name. Surrounding brackets are removed."""

    def __new__(cls, name: str | None = None) -> Self:
        """
        Args:
            name (str | None, optional): Name of the section, with or without
                brackets. Defaults to None (empty name).
        """
        name = _trim(name)
        if name.startswith(SECTION_NAME_OPENING):
            name = name[1:]
        if name.endswith(SECTION_NAME_CLOSING):
            name = name[:-1]
        return super().__new__(cls, name.strip())
