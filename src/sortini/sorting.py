"""Sorting sections and entries of an ini document."""

from typing import TYPE_CHECKING, Callable
from functools import cmp_to_key
import logging
from .entities import Entry
from .globals import SortDirection, StringComparison
from .utils import _str_to_long

if TYPE_CHECKING:
    from .interface import IniDocument
    from .section import Section

logger = logging.getLogger(__name__)

type Comparator[T] = Callable[[T, T], int]
"""Function returning a negative number, zero or a positive number if the first
argument is smaller than, equal to or greater than the second."""


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_strings(a: str, b: str, comparison: StringComparison) -> int:
    """Compare two strings.

    Args:
        a (str): First string.
        b (str): Second string.
        comparison ("case-sensitive" | "case-insensitive"): How to compare.

    Returns:
        int: Negative, zero or positive.
    """
    if comparison == "case-insensitive":
        return _cmp(a.casefold(), b.casefold())
    return _cmp(a, b)


def compare_tokens(
    a: str, b: str, comparison: StringComparison, natural_sort: bool = True
) -> int:
    """Compare two names or values. If natural_sort is set and both are integers,
    they are compared numerically.

    Args:
        a (str): First token.
        b (str): Second token.
        comparison ("case-sensitive" | "case-insensitive"): How to compare strings.
        natural_sort (bool, optional): Whether to compare integers numerically.
            Defaults to True.

    Returns:
        int: Negative, zero or positive.
    """
    if natural_sort:
        a_long, b_long = _str_to_long(a), _str_to_long(b)
        if a_long is not None and b_long is not None:
            return _cmp(a_long, b_long)
    return compare_strings(a, b, comparison)


def section_comparator(comparison: StringComparison) -> Comparator["Section"]:
    """Ascending comparator for sections (by name)."""
    return lambda a, b: compare_strings(a.name, b.name, comparison)


def entry_comparator(
    comparison: StringComparison, natural_sort: bool = True
) -> Comparator[Entry]:
    """Ascending comparator for entries. Compares names and, if the names are equal,
    values.

    Args:
        comparison ("case-sensitive" | "case-insensitive"): How to compare strings.
        natural_sort (bool, optional): Whether to compare integers numerically.
            Defaults to True.

    Returns:
        Comparator[Entry]: The comparator.
    """

    def compare(a: Entry, b: Entry) -> int:
        return compare_tokens(
            a.name, b.name, comparison, natural_sort
        ) or compare_tokens(a.value, b.value, comparison, natural_sort)

    return compare


def directed[T](comparator: Comparator[T], direction: SortDirection) -> Comparator[T]:
    """Apply a sort direction to an ascending comparator.

    Args:
        comparator (Comparator[T]): The ascending comparator.
        direction ("ascending" | "descending" | None): The direction.

    Returns:
        Comparator[T]: The comparator itself or one with negated results for
            "descending".
    """
    if direction == "descending":
        return lambda a, b: -comparator(a, b)
    return comparator


def sort(document: "IniDocument") -> None:
    """Sort sections and entries of a document in place, as configured in its
    parameters. Sorting is stable, sorting twice changes nothing.

    Args:
        document (IniDocument): The document to sort.
    """
    parameters = document.parameters

    if (direction := parameters.sections_sort_direction) is not None:
        document.sections.sort(
            key=cmp_to_key(
                directed(section_comparator(parameters.sections_comparison), direction)
            )
        )
        logger.debug("Sorted %d sections %s.", len(document.sections), direction)

    if (direction := parameters.entries_sort_direction) is not None:
        key = cmp_to_key(
            directed(
                entry_comparator(
                    parameters.entries_comparison, parameters.natural_sort
                ),
                direction,
            )
        )
        # entries before the first section name keep their order
        for section in document.sections:
            section.entries.sort(key=key)
        logger.debug("Sorted entries of every named section %s.", direction)
