from typing import Any, Self, get_args
from .globals import StringComparison, SortDirection


class Parameters:
    """Parameters for reading, sorting and writing."""

    def __init__(
        self,
        expand: bool = True,
        expand_extra_entries_with_comments: bool = False,
        sections_comparison: StringComparison = "case-insensitive",
        entries_comparison: StringComparison = "case-insensitive",
        sections_sort_direction: SortDirection = "ascending",
        entries_sort_direction: SortDirection = "ascending",
        treat_plain_text_as_comment: bool = True,
        natural_sort: bool = True,
    ) -> None:
        """
        Args:
            expand (bool, optional): Whether to write an empty line before every
                section and a space before and after the option delimiter.
                Defaults to True.
            expand_extra_entries_with_comments (bool, optional): Whether to surround
                entries that carry comments with empty lines. Defaults to False.
            sections_comparison ("case-sensitive" | "case-insensitive", optional):
                How section names are compared for sorting and lookup.
                Defaults to "case-insensitive".
            entries_comparison ("case-sensitive" | "case-insensitive", optional):
                How entry names and values are compared for sorting and lookup.
                Defaults to "case-insensitive".
            sections_sort_direction ("ascending" | "descending" | None, optional):
                Direction to sort sections in. If None, sections keep their order.
                Defaults to "ascending".
            entries_sort_direction ("ascending" | "descending" | None, optional):
                Direction to sort the entries of every section in. If None, entries
                keep their order. Defaults to "ascending".
            treat_plain_text_as_comment (bool, optional): Whether lines that are
                neither section name, option nor comment should be added to the
                comments of the next entity. Otherwise they are kept as plain text
                entries. Defaults to True.
            natural_sort (bool, optional): Whether to compare two names (or values)
                as numbers if both are integers. Defaults to True.
        """
        self.expand = expand
        self.expand_extra_entries_with_comments = expand_extra_entries_with_comments
        self.sections_comparison = sections_comparison
        self.entries_comparison = entries_comparison
        self.sections_sort_direction = sections_sort_direction
        self.entries_sort_direction = entries_sort_direction
        self.treat_plain_text_as_comment = treat_plain_text_as_comment
        self.natural_sort = natural_sort

    @property
    def sections_comparison(self) -> StringComparison:
        return self._sections_comparison

    @sections_comparison.setter
    def sections_comparison(self, value: StringComparison) -> None:
        self.verify_literal(value, StringComparison, "sections comparison")
        self._sections_comparison = value

    @property
    def entries_comparison(self) -> StringComparison:
        return self._entries_comparison

    @entries_comparison.setter
    def entries_comparison(self, value: StringComparison) -> None:
        self.verify_literal(value, StringComparison, "entries comparison")
        self._entries_comparison = value

    @property
    def sections_sort_direction(self) -> SortDirection:
        return self._sections_sort_direction

    @sections_sort_direction.setter
    def sections_sort_direction(self, value: SortDirection) -> None:
        self.verify_literal(value, SortDirection, "sections sort direction")
        self._sections_sort_direction = value

    @property
    def entries_sort_direction(self) -> SortDirection:
        return self._entries_sort_direction

    @entries_sort_direction.setter
    def entries_sort_direction(self, value: SortDirection) -> None:
        self.verify_literal(value, SortDirection, "entries sort direction")
        self._entries_sort_direction = value

    @staticmethod
    def verify_literal(value: Any, allowed: Any, name: str) -> None:
        """Make sure value is one of the values a Literal type alias permits.

        Args:
            value (Any): The value to verify.
            allowed (Any): The type alias (of a Literal or a union with None).
            name (str): Name of the parameter for the error message.
        """
        options = Parameters._literal_values(allowed.__value__)
        if value not in options:
            raise ValueError(
                f"{value!r} is not a valid {name}. Valid are: "
                f"{", ".join(repr(o) for o in options)}."
            )

    @staticmethod
    def _literal_values(hint: Any) -> tuple[Any, ...]:
        if hint is None or hint is type(None):
            return (None,)
        if args := get_args(hint):
            return tuple(
                value
                for arg in args
                for value in (
                    Parameters._literal_values(arg)
                    if arg is None or arg is type(None) or get_args(arg)
                    else (arg,)
                )
            )
        return (hint,)

    def update(self, **kwargs) -> None:
        """Update parameters with kwargs

        Args:
            **kwargs: Keyword-arguments to update the parameters with.
        """
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"'{k}' is not a parameter.")
            setattr(self, k, v)

    def copy(self) -> Self:
        """Create an independent copy of these parameters."""
        return type(self)(**self.as_dict())

    def as_dict(self) -> dict[str, Any]:
        return {
            "expand": self.expand,
            "expand_extra_entries_with_comments": (
                self.expand_extra_entries_with_comments
            ),
            "sections_comparison": self.sections_comparison,
            "entries_comparison": self.entries_comparison,
            "sections_sort_direction": self.sections_sort_direction,
            "entries_sort_direction": self.entries_sort_direction,
            "treat_plain_text_as_comment": self.treat_plain_text_as_comment,
            "natural_sort": self.natural_sort,
        }

    def __repr__(self) -> str:
        return f"Parameters({", ".join(f"{k}={v!r}" for k, v in self.as_dict().items())})"
