from typing import Any, Iterable
from .collections import Entries
from .entities import Entry, SectionName
from .globals import (
    SECTION_NAME_OPENING,
    SECTION_NAME_CLOSING,
    SortDirection,
    StringComparison,
)
from .sorting import compare_strings
from .utils import _trim


class Section:
    """A configuration section. Holds its name, the comments above its name and
    its entries (options, commented-out lines and plain text).
    """

    def __init__(
        self,
        name: str | None = None,
        comments: str | None = None,
        entries: Iterable[Entry] = (),
        sort_direction: SortDirection = None,
        comparison: StringComparison = "case-insensitive",
    ) -> None:
        """
        Args:
            name (str | None, optional): Name of the section, with or without
                brackets. Defaults to None.
            comments (str | None, optional): Comment lines above the section name.
                Defaults to None.
            entries (Iterable[Entry], optional): Initial entries. Defaults to ().
            sort_direction ("ascending" | "descending" | None, optional): Direction
                used when comparing this section with another. Anything but
                "ascending" compares descending. Defaults to None.
            comparison ("case-sensitive" | "case-insensitive", optional): How entry
                names are compared on lookup. Defaults to "case-insensitive".
        """
        self.name = name
        self.comments = comments
        self.entries: Entries[Entry] = Entries(entries, comparison)
        self.sort_direction: SortDirection = sort_direction

    @property
    def name(self) -> SectionName:
        return self._name

    @name.setter
    def name(self, value: str | None) -> None:
        self._name = SectionName(value)

    @property
    def comments(self) -> str:
        return self._comments

    @comments.setter
    def comments(self, value: str | None) -> None:
        self._comments = _trim(value)

    def add_entry(self, entry: Entry) -> Entry:
        """Append an entry to the section.

        Args:
            entry (Entry): The entry to add.

        Returns:
            Entry: The added entry.
        """
        self.entries.append(entry)
        return entry

    def get(self, name: str, default: Any = None) -> Entry | Any:
        """Get the first entry with the given name (or default)."""
        return self.entries.get(name, default)

    def __getitem__(self, name: str) -> Entry:
        return self.entries[name]

    def __setitem__(self, name: str, entry: Entry) -> None:
        self.entries[name] = entry

    def __contains__(self, name: str) -> bool:
        return name in self.entries

    def __iter__(self):
        return iter(self.entries)

    def compare(self, other: "Section") -> int:
        """Compare the names of two sections.

        Args:
            other (Section): The section to compare with.

        Returns:
            int: Negative if self comes first, positive if other comes first,
                0 if the names are equal. Case only decides between names that
                are otherwise equal. The result is inverted unless the section's
                sort_direction is "ascending".
        """
        if not isinstance(other, Section):
            raise TypeError(f"Can't compare Section with {type(other).__name__}.")
        result = compare_strings(
            self.name, other.name, "case-insensitive"
        ) or compare_strings(self.name, other.name, "case-sensitive")
        return result if self.sort_direction == "ascending" else -result

    def __lt__(self, other: "Section") -> bool:
        return self.compare(other) < 0

    def __str__(self) -> str:
        return f"{SECTION_NAME_OPENING}{self.name}{SECTION_NAME_CLOSING}"

    def __repr__(self) -> str:
        return f"Section(name={self.name!r}, entries={len(self.entries)})"
