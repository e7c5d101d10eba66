"""Ordered collections of named items, with name lookup."""

from typing import Any, Iterable, Protocol, SupportsIndex, overload
from .exceptions_warnings import EntityNotFound
from .globals import StringComparison


class _Named(Protocol):
    @property
    def name(self) -> str: ...


def names_equal(a: str, b: str, comparison: StringComparison) -> bool:
    """Check two names for equality.

    Args:
        a (str): First name.
        b (str): Second name.
        comparison ("case-sensitive" | "case-insensitive"): How to compare.

    Returns:
        bool: Whether the names are equal.
    """
    if comparison == "case-insensitive":
        return a.casefold() == b.casefold()
    return a == b


class NamedList[T: _Named](list[T]):
    """List of named items. Insertion order is kept, items can additionally be
    accessed by name. Names don't have to be unique, lookups return the first match.
    """

    def __init__(
        self,
        items: Iterable[T] = (),
        comparison: StringComparison = "case-insensitive",
    ) -> None:
        """
        Args:
            items (Iterable[T], optional): Initial items. Defaults to ().
            comparison ("case-sensitive" | "case-insensitive", optional): How names
                are compared on lookup. Defaults to "case-insensitive".
        """
        super().__init__(items)
        self.comparison: StringComparison = comparison

    def index_of(self, name: str, comparison: StringComparison | None = None) -> int:
        """Get the position of the first item with the given name.

        Args:
            name (str): The name to look for.
            comparison ("case-sensitive" | "case-insensitive" | None, optional): How to
                compare names. If None, will use the collection's comparison.
                Defaults to None.

        Returns:
            int: The position or -1 if no item has that name.
        """
        comparison = comparison or self.comparison
        return next(
            (
                i
                for i, item in enumerate(self)
                if names_equal(item.name, name, comparison)
            ),
            -1,
        )

    def get(self, name: str, default: Any = None) -> T | Any:
        """Get the first item with the given name.

        Args:
            name (str): The name to look for.
            default (Any, optional): Returned if no item has that name.
                Defaults to None.

        Returns:
            T | Any: The item or default.
        """
        index = self.index_of(name)
        return default if index == -1 else super().__getitem__(index)

    def contains(self, name: str, comparison: StringComparison | None = None) -> bool:
        """Check whether an item with the given name exists.

        Args:
            name (str): The name to look for.
            comparison ("case-sensitive" | "case-insensitive" | None, optional): How to
                compare names. If None, will use the collection's comparison.
                Defaults to None.

        Returns:
            bool
        """
        return self.index_of(name, comparison) != -1

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return self.contains(item)
        return super().__contains__(item)

    @overload
    def __getitem__(self, key: SupportsIndex) -> T: ...
    @overload
    def __getitem__(self, key: slice) -> list[T]: ...
    @overload
    def __getitem__(self, key: str) -> T: ...

    def __getitem__(self, key: SupportsIndex | slice | str) -> T | list[T]:
        if isinstance(key, str):
            index = self.index_of(key)
            if index == -1:
                raise EntityNotFound(f"'{key}' doesn't exist.")
            key = index
        return super().__getitem__(key)

    def __setitem__(self, key: Any, value: Any) -> None:
        if isinstance(key, str):
            # replace first match in place, otherwise append
            index = self.index_of(key)
            if index == -1:
                self.append(value)
                return
            key = index
        super().__setitem__(key, value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__repr__()})"


class Entries[T: _Named](NamedList[T]):
    """Entries of a section."""


class Sections[T: _Named](NamedList[T]):
    """Sections of an ini document."""
