"""numeralsys exception hierarchy."""

from __future__ import annotations


class NumeralSystemsError(Exception):
    """Base exception for all numeralsys errors."""


class NullInputError(NumeralSystemsError, TypeError):
    """Source string was None."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}: source must not be None")


class InvalidFormatError(NumeralSystemsError, ValueError):
    """Source is not a valid numeral for the requested radix."""

    def __init__(self, source: object, radix: int, reason: str) -> None:
        self.source = source
        self.radix = radix
        self.reason = reason
        super().__init__(f"Invalid base-{radix} numeral {source!r}: {reason}")


class InvalidRadixError(NumeralSystemsError, ValueError):
    """Radix is not one of 8, 10 or 16."""

    def __init__(self, radix: object) -> None:
        self.radix = radix
        super().__init__(f"Radix must be 8, 10 or 16, got {radix!r}")
