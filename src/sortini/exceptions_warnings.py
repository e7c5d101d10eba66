"""sortini-specific exceptions and warnings"""

# ---------- #
# Exceptions
# ---------- #


class ExtractionError(Exception):
    """Raised when an entity could not be extracted."""


class EntityNotFound(KeyError):
    """Raised when an entity was to be accessed but doesn't exist."""


# ---------- #
# Warnings
# ---------- #


class IniStructureWarning(Warning):
    """Raised when a line could not be interpreted and is kept as plain text."""
