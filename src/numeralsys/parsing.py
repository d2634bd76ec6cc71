"""Module-level conversion functions backed by a shared default dispatcher.

The per-radix ``parse_*`` names are positive-semantics aliases of the
``parse_positive_*`` functions.
"""

from __future__ import annotations

from functools import lru_cache

from numeralsys.core.protocols import INumeralConverter
from numeralsys.core.types import Radix
from numeralsys.dispatch import RadixDispatcher, create_dispatcher
from numeralsys.models.result import ParseResult


@lru_cache(maxsize=1)
def get_default_dispatcher() -> RadixDispatcher:
    """Dispatcher built from environment settings on first use."""
    return create_dispatcher()


def _converter(radix: Radix) -> INumeralConverter:
    return get_default_dispatcher().converter_for(radix)


# ---------------------------------------------------------------------------
# Octal
# ---------------------------------------------------------------------------

def convert_octal(source: str) -> int:
    return _converter(Radix.OCTAL).convert(source)


def parse_positive_octal(source: str) -> int:
    return _converter(Radix.OCTAL).parse_positive(source)


def try_convert_octal(source: str) -> ParseResult:
    return _converter(Radix.OCTAL).try_convert(source)


def try_parse_positive_octal(source: str) -> ParseResult:
    return _converter(Radix.OCTAL).try_parse_positive(source)


# ---------------------------------------------------------------------------
# Decimal
# ---------------------------------------------------------------------------

def convert_decimal(source: str) -> int:
    return _converter(Radix.DECIMAL).convert(source)


def parse_positive_decimal(source: str) -> int:
    """Decimal value of ``source``; negatives are rejected, zero is not."""
    return _converter(Radix.DECIMAL).parse_positive(source)


def try_convert_decimal(source: str) -> ParseResult:
    return _converter(Radix.DECIMAL).try_convert(source)


def try_parse_positive_decimal(source: str) -> ParseResult:
    """Unsigned digits only; unlike parse_positive_decimal, zero fails."""
    return _converter(Radix.DECIMAL).try_parse_positive(source)


# ---------------------------------------------------------------------------
# Hexadecimal
# ---------------------------------------------------------------------------

def convert_hex(source: str) -> int:
    return _converter(Radix.HEXADECIMAL).convert(source)


def parse_positive_hex(source: str) -> int:
    return _converter(Radix.HEXADECIMAL).parse_positive(source)


def try_convert_hex(source: str) -> ParseResult:
    return _converter(Radix.HEXADECIMAL).try_convert(source)


def try_parse_positive_hex(source: str) -> ParseResult:
    return _converter(Radix.HEXADECIMAL).try_parse_positive(source)


# ---------------------------------------------------------------------------
# Radix dispatch
# ---------------------------------------------------------------------------

def parse_by_radix(source: str, radix: int) -> int:
    return get_default_dispatcher().parse(source, radix)


def parse_positive_by_radix(source: str, radix: int) -> int:
    return get_default_dispatcher().parse_positive(source, radix)


def try_parse_by_radix(source: str, radix: int) -> ParseResult:
    """Content failures give ``(False, 0)``; a bad radix still raises."""
    return get_default_dispatcher().try_parse(source, radix)


def try_parse_positive_by_radix(source: str, radix: int) -> ParseResult:
    return get_default_dispatcher().try_parse_positive(source, radix)


parse_octal = parse_positive_octal
parse_decimal = parse_positive_decimal
parse_hex = parse_positive_hex
try_parse_octal = try_parse_positive_octal
try_parse_decimal = try_parse_positive_decimal
try_parse_hex = try_parse_positive_hex
