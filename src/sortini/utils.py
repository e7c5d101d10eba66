import re
from typing import Callable

_LONG_MIN = -(2**63)
_LONG_MAX = 2**63 - 1


def copy_doc[
    **P, T
](doc_source: Callable[P, T], annotations: bool = False) -> Callable[
    [Callable[P, T]], Callable[P, T]
]:
    """Decorator to copy the docstring of doc_source to another.
    Inspired by Trevor (stackoverflow.com/users/13905088/trevor)
    from: stackoverflow.com/questions/68901049/
        copying-the-docstring-of-function-onto-another-function-by-name

    Args:
        doc_source (Callable): The source function to copy the docstring from.
        annotations (bool, optional): Whether to also copy annotations. Defaults to False.

    Returns:
        Callable: The decorated function.

    """

    def wrapped(doc_target: Callable[P, T]) -> Callable[P, T]:
        doc_target.__doc__ = doc_source.__doc__
        if annotations:
            doc_target.__annotations__ = doc_source.__annotations__
        return doc_target

    return wrapped


def _str_to_long(string: str) -> int | None:
    """Interpret a string as a signed 64-bit integer.

    Args:
        string (str): The string to interpret. Surrounding whitespace and a leading
            sign are allowed.

    Returns:
        int | None: The integer or None if string is no 64-bit integer.
    """
    if not re.fullmatch(r"\s*[+-]?\d+\s*", string, flags=re.ASCII):
        return None
    number = int(string)
    return number if _LONG_MIN <= number <= _LONG_MAX else None


def _trim(value: str | None) -> str:
    """Strip a string, turning None into an empty string."""
    return value.strip() if value is not None else ""
