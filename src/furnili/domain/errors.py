"""Domain exceptions for BOM calculation.

Validation problems subclass ``ValueError`` and missing reference data
subclasses ``LookupError`` so callers can catch either the specific type
or the builtin family.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when calculation input is rejected before any computation.

    Attributes:
        field: Name of the offending input field, if known.
        value: The rejected value, if known.
    """

    def __init__(
        self, message: str, field: str | None = None, value: object = None
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message)


class RateLookupError(LookupError):
    """Raised when no active rate row matches the requested key.

    Attributes:
        table: Which reference table was searched ("board" or "hardware").
        key: The lookup key that had no match.
    """

    def __init__(self, table: str, key: tuple[str, ...]) -> None:
        self.table = table
        self.key = key
        super().__init__(f"No {table} rate for {' / '.join(key)}")


class CalculationNotFoundError(LookupError):
    """Raised when a stored calculation number does not exist."""

    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(f"BOM calculation not found: {number}")


class StatusTransitionError(Exception):
    """Raised when a calculation cannot move to the requested status."""

    def __init__(self, number: str, current: str, target: str) -> None:
        self.number = number
        self.current = current
        self.target = target
        super().__init__(
            f"Cannot change {number} from {current} to {target}"
        )
