"""Turning an ini document back into text."""

from typing import TYPE_CHECKING
import re
from .entities import Comment, Entry, NameValue, PlainText
from .globals import NO_KEY_PLACEHOLDER
from .section import Section

if TYPE_CHECKING:
    from .interface import IniDocument

NEWLINE = "\n"
_BLANK_RUN = re.compile(rf"{NEWLINE}{{3,}}")


def export_entry(
    entry: Entry, expand: bool, expand_extra_entries_with_comments: bool = False
) -> str:
    """Convert an entry (including its comments) into ini lines.

    Args:
        entry (Entry): The entry to convert.
        expand (bool): Whether to put spaces around the option delimiter.
        expand_extra_entries_with_comments (bool, optional): Whether to surround an
            entry that has comments with empty lines. Defaults to False.

    Returns:
        str: The ini lines, each terminated by a newline.
    """
    out = ""
    padded = bool(entry.comments) and expand_extra_entries_with_comments

    if entry.comments:
        if padded:
            out += NEWLINE
        out += entry.comments + NEWLINE

    match entry:
        case Comment():
            out += str(entry)
        case NameValue():
            out += NameValue(
                entry.name or NO_KEY_PLACEHOLDER, entry.value
            ).to_string(expand)
        case PlainText():
            out += entry.text
    out += NEWLINE

    if padded:
        out += NEWLINE
    return out


def export_section(
    section: Section, expand: bool, expand_extra_entries_with_comments: bool = False
) -> str:
    """Convert a named section into ini lines. Runs of more than one empty line
    are reduced to one.

    Args:
        section (Section): The section to convert.
        expand (bool): Whether to put an empty line before the section and spaces
            around option delimiters.
        expand_extra_entries_with_comments (bool, optional): Whether to surround
            entries that have comments with empty lines. Defaults to False.

    Returns:
        str: The ini lines, each terminated by a newline.
    """
    out = NEWLINE if expand else ""
    if section.comments:
        out += section.comments + NEWLINE
    out += str(section) + NEWLINE
    for entry in section.entries:
        out += export_entry(entry, expand, expand_extra_entries_with_comments)
    return _BLANK_RUN.sub(NEWLINE * 2, out)


def export(
    document: "IniDocument",
    expand: bool | None = None,
    expand_extra_entries_with_comments: bool | None = None,
) -> str:
    """Convert a whole document into ini text.

    Args:
        document (IniDocument): The document to convert. Is not modified.
        expand (bool | None, optional): Whether to put an empty line before every
            section and spaces around option delimiters. If None, will take the
            document's parameter. Defaults to None.
        expand_extra_entries_with_comments (bool | None, optional): Whether to
            surround entries that have comments with empty lines. If None, will take
            the document's parameter. Defaults to None.

    Returns:
        str: The ini text.
    """
    if expand is None:
        expand = document.parameters.expand
    if expand_extra_entries_with_comments is None:
        expand_extra_entries_with_comments = (
            document.parameters.expand_extra_entries_with_comments
        )

    out = ""

    # unnamed section
    unnamed = document.unnamed_section
    if unnamed.comments:
        out += unnamed.comments + NEWLINE
    if unnamed.entries:
        for entry in unnamed.entries:
            out += export_entry(entry, expand, expand_extra_entries_with_comments)
        out += NEWLINE

    for section in document.sections:
        out += export_section(section, expand, expand_extra_entries_with_comments)

    if document.trailing_comments:
        out += document.trailing_comments + NEWLINE

    return out
