"""Domain error taxonomy.

All errors are contract violations raised at the point of violation. They subclass
the matching builtin so callers catching ``ValueError``/``TypeError`` keep working.
"""

from __future__ import annotations


class DataModelError(Exception):
    """Base class for entity data model errors."""


class FormatError(DataModelError, ValueError):
    """Raised when an identifier or claim GUID serialization is malformed."""


class TypeMismatchError(DataModelError, TypeError):
    """Raised when entity kinds do not line up (id vs entity, diff vs entity)."""


class IllegalStateError(DataModelError, RuntimeError):
    """Raised when mutating state that is fixed after construction."""
