from typing import Literal

COMMENT_MARKERS = (";", "#")
"""Characters that start a comment line."""
PURE_COMMENT_PREFIXES = ("; ", "#")
"""Prefixes of lines that are kept as comment text instead of commented-out entries."""
HEADER_COMMENT_MARKER = "#"
SECTION_NAME_OPENING = "["
SECTION_NAME_CLOSING = "]"
OPTION_DELIMITER = "="
PLAIN_TEXT_COMMENT_PREFIX = "; **"
"""Prefix for plain text lines folded into a comment block."""
UNNAMED_SECTION_NAME = "#unnamed"
NO_KEY_PLACEHOLDER = "****NO_KEY"
"""Written in place of an empty option name."""

type StringComparison = Literal["case-sensitive", "case-insensitive"]
"""How strings are compared when looking up or sorting."""
type SortDirection = Literal["ascending", "descending"] | None
"""Sort direction, None for leaving the order untouched."""
