"""Interface classes exist for coder interaction, to simplify the process
behind sortini."""

from typing import Any, Iterable, Iterator
from pathlib import Path
import logging
from charset_normalizer import from_bytes as read_from_bytes
from .args import Parameters
from .collections import Sections
from .globals import UNNAMED_SECTION_NAME
from .reader import _ReadIni
from .section import Section
from .sorting import sort
from .utils import _trim, copy_doc
from .writer import export

logger = logging.getLogger(__name__)


class IniDocument:
    """A whole ini file: comments and entries before the first section name
    (unnamed section), the named sections and the comments after the last entry.
    """

    def __init__(
        self,
        file_name: str | Path | None = None,
        parameters: Parameters | None = None,
        **kwargs,
    ) -> None:
        """
        Args:
            file_name (str | Path | None, optional): Path used by load and save if no
                other path is passed. Defaults to None.
            parameters (Parameters | None, optional): Parameters for reading, sorting
                and writing. Parameters can also be passed as kwargs, which update
                the given (or default) parameters. Defaults to None.
            **kwargs (optional): Parameters as kwargs. See doc of Parameters for details.
        """
        self.file_name = file_name
        self.parameters = Parameters() if parameters is None else parameters
        if kwargs:
            self.parameters.update(**kwargs)

        self.unnamed_section = Section(
            UNNAMED_SECTION_NAME, comparison=self.parameters.entries_comparison
        )
        self.sections: Sections[Section] = Sections(
            comparison=self.parameters.sections_comparison
        )
        self.trailing_comments = ""

    @property
    def file_name(self) -> str:
        return self._file_name

    @file_name.setter
    def file_name(self, value: str | Path | None) -> None:
        self._file_name = _trim(str(value) if value is not None else None)

    @property
    def trailing_comments(self) -> str:
        """Comment lines after the last entry of the file."""
        return self._trailing_comments

    @trailing_comments.setter
    def trailing_comments(self, value: str | None) -> None:
        self._trailing_comments = _trim(value)

    # ----
    # reading
    # ----

    def load_lines(self, lines: Iterable[str]) -> bool:
        """Load ini content from lines. Previous content is replaced.

        Args:
            lines (Iterable[str]): The lines of the ini (with or without line breaks).

        Returns:
            bool: True (content is never rejected, unknown lines become comments or
                plain text entries).
        """
        _ReadIni(target=self, lines=lines)
        return True

    def load(self, path: str | Path | None = None) -> bool:
        """Load an ini file. Previous content is replaced.

        Args:
            path (str | Path | None, optional): Path to the ini file. If given, it
                becomes the document's file_name. If None, will use file_name.
                Defaults to None.

        Returns:
            bool: Whether the file could be read.
        """
        file_name = self._resolve_path(path)
        file_path = Path(file_name)
        if not file_path.is_file():
            logger.warning("File %s not found.", file_name)
            return False

        try:
            match = read_from_bytes(file_path.read_bytes()).best()
        except OSError as e:
            logger.warning("Failed to read %s: %s", file_name, e)
            return False
        if match is None:
            logger.warning("Could not decode %s.", file_name)
            return False

        self.file_name = file_name
        logger.debug("Loading %s (%s).", file_name, match.encoding)
        return self.load_lines(str(match).lstrip("\ufeff").splitlines())

    # ----
    # writing
    # ----

    @copy_doc(export)
    def export(
        self,
        expand: bool | None = None,
        expand_extra_entries_with_comments: bool | None = None,
    ) -> str:
        return export(self, expand, expand_extra_entries_with_comments)

    def save(self, path: str | Path | None = None) -> bool:
        """Write the document to a file (utf-8). Does not change file_name.

        Args:
            path (str | Path | None, optional): Path to write to. If None, will use
                file_name. Defaults to None.

        Returns:
            bool: Whether the file could be written.
        """
        file_name = self._resolve_path(path)
        try:
            Path(file_name).write_text(self.export(), encoding="utf-8")
        except OSError as e:
            logger.warning("Failed to write %s: %s", file_name, e)
            return False
        logger.debug("Saved %s.", file_name)
        return True

    def _resolve_path(self, path: str | Path | None) -> str:
        file_name = _trim(str(path) if path is not None else self.file_name)
        if not file_name:
            raise ValueError("No file name given.")
        return file_name

    # ----
    # sorting
    # ----

    @copy_doc(sort)
    def sort(self) -> None:
        sort(self)

    # ----
    # sections
    # ----

    def add_section(self, section: Section | str) -> Section:
        """Append a section (duplicate names are allowed).

        Args:
            section (Section | str): The section or the name for a new section.

        Returns:
            Section: The added section.
        """
        if not isinstance(section, Section):
            section = Section(section, comparison=self.parameters.entries_comparison)
        self.sections.append(section)
        return section

    def get(self, name: str, default: Any = None) -> Section | Any:
        """Get the first section with the given name (or default)."""
        return self.sections.get(name, default)

    def __getitem__(self, name: str) -> Section:
        return self.sections[name]

    def __setitem__(self, name: str, section: Section) -> None:
        self.sections[name] = section

    def __contains__(self, name: str) -> bool:
        return name in self.sections

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __str__(self) -> str:
        return self.export()


def parse(lines: Iterable[str], parameters: Parameters | None = None) -> IniDocument:
    """Create a document from ini lines.

    Args:
        lines (Iterable[str]): The lines of the ini.
        parameters (Parameters | None, optional): Parameters for the new document.
            Defaults to None (default parameters).

    Returns:
        IniDocument: The new document.
    """
    document = IniDocument(parameters=parameters)
    document.load_lines(lines)
    return document
