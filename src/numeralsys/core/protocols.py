"""Protocol interfaces for numeralsys converters.

Structural typing keeps the dispatcher open to any converter that offers
the strict and try operations below, no inheritance required.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from numeralsys.models.result import ParseResult


@runtime_checkable
class INumeralConverter(Protocol):
    """Single-radix string to int32 converter."""

    radix: int

    def convert(self, source: str) -> int: ...

    def parse_positive(self, source: str) -> int: ...

    def try_convert(self, source: str) -> ParseResult: ...

    def try_parse_positive(self, source: str) -> ParseResult: ...
