"""Turning ini lines into sections and entries."""

from typing import TYPE_CHECKING, Iterable
import logging
import warnings
from .collections import Sections
from .entities import Comment, Entry, PlainText, entry_from_string
from .exceptions_warnings import IniStructureWarning
from .globals import (
    COMMENT_MARKERS,
    HEADER_COMMENT_MARKER,
    OPTION_DELIMITER,
    PLAIN_TEXT_COMMENT_PREFIX,
    PURE_COMMENT_PREFIXES,
    SECTION_NAME_OPENING,
    UNNAMED_SECTION_NAME,
)
from .section import Section

if TYPE_CHECKING:
    from .interface import IniDocument

logger = logging.getLogger(__name__)


def _flush(pending: list[str]) -> str:
    """Join the accumulated comment lines into one block and reset the accumulator.

    Args:
        pending (list[str]): The accumulated comment lines.

    Returns:
        str: The comment block.
    """
    block = "\n".join(pending)
    pending.clear()
    return block


class _ReadIni:

    def __init__(self, target: "IniDocument", lines: Iterable[str]) -> None:
        """Read ini lines into target, replacing its previous content. For more info
        cf. IniDocument.load_lines."""
        if lines is None:
            raise ValueError("lines must not be None.")

        self.target = target
        self.parameters = target.parameters

        # ----
        # define variables for read process
        # ----
        self.target.unnamed_section = Section(
            UNNAMED_SECTION_NAME, comparison=self.parameters.entries_comparison
        )
        self.target.sections = Sections(
            comparison=self.parameters.sections_comparison
        )
        self.current_section: Section = self.target.unnamed_section
        self.current_entity_index: int = 0
        self.current_entity_content: str = ""
        self.in_header: bool = True
        self.pending: list[str] = []
        """Comment lines waiting for the next section or entry."""
        # ----

        for self.current_entity_index, line in enumerate(lines, start=1):
            self.current_entity_content = line.strip()

            if self.in_header and self._handle_header():
                continue

            if not self.current_entity_content:
                # empty entity, skip
                pass

            # try to extract comment
            elif self.current_entity_content.startswith(COMMENT_MARKERS):
                self._handle_comment()

            # try to extract section
            elif self.current_entity_content.startswith(SECTION_NAME_OPENING):
                self._handle_section_name()

            else:
                self._handle_option()

        if self.in_header:
            # nothing but header comments
            self.target.unnamed_section.comments = _flush(self.pending)
        self.target.trailing_comments = _flush(self.pending)

        logger.debug(
            "Read %d lines into %d sections.",
            self.current_entity_index,
            len(self.target.sections),
        )

    def _handle_header(self) -> bool:
        """Handle a line of the header (empty lines and "#" comments at the beginning
        of the ini). Ends the header at the first other line.

        Returns:
            bool: Whether the line belonged to the header.
        """
        content = self.current_entity_content
        if not content or content.startswith(HEADER_COMMENT_MARKER):
            self.pending.append(content)
            return True
        self.target.unnamed_section.comments = _flush(self.pending)
        self.in_header = False
        return False

    def _handle_comment(self) -> None:
        """Handle a line starting with a comment marker. Comments are kept for the
        next entity, commented-out lines become Comment entries."""
        if self.current_entity_content.startswith(PURE_COMMENT_PREFIXES):
            self.pending.append(self.current_entity_content)
            return
        # commented-out entry
        self._add_entry(
            Comment.from_string(self.current_entity_content, _flush(self.pending))
        )

    def _handle_section_name(self) -> None:
        """Start a new section (appended even if the name already exists)."""
        self.current_section = Section(
            self.current_entity_content,
            _flush(self.pending),
            comparison=self.parameters.entries_comparison,
        )
        self.target.sections.append(self.current_section)

    def _handle_option(self) -> None:
        """Handle a line that is neither empty, comment nor section name."""
        content = self.current_entity_content
        if (
            OPTION_DELIMITER not in content
            and self.parameters.treat_plain_text_as_comment
        ):
            self.pending.append(f"{PLAIN_TEXT_COMMENT_PREFIX}{content}")
            return

        entry = entry_from_string(content, _flush(self.pending))
        if isinstance(entry, PlainText):
            warnings.warn(
                f"Line {self.current_entity_index} is neither a section name, an"
                " option nor a comment and is kept as plain text.",
                IniStructureWarning,
            )
        self._add_entry(entry)

    def _add_entry(self, entry: Entry) -> None:
        self.current_section.add_entry(entry)
