"""Octal, decimal and hexadecimal string to int32 conversion."""

from __future__ import annotations

import logging

from numeralsys.core.exceptions import (
    InvalidFormatError,
    InvalidRadixError,
    NullInputError,
    NumeralSystemsError,
)
from numeralsys.core.types import Radix
from numeralsys.models.result import ParseResult
from numeralsys.parsing import (
    convert_decimal,
    convert_hex,
    convert_octal,
    get_default_dispatcher,
    parse_by_radix,
    parse_decimal,
    parse_hex,
    parse_octal,
    parse_positive_by_radix,
    parse_positive_decimal,
    parse_positive_hex,
    parse_positive_octal,
    try_convert_decimal,
    try_convert_hex,
    try_convert_octal,
    try_parse_by_radix,
    try_parse_decimal,
    try_parse_hex,
    try_parse_octal,
    try_parse_positive_by_radix,
    try_parse_positive_decimal,
    try_parse_positive_hex,
    try_parse_positive_octal,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "NumeralSystemsError", "NullInputError", "InvalidFormatError", "InvalidRadixError",
    # Types
    "Radix", "ParseResult",
    # Strict
    "convert_octal", "convert_decimal", "convert_hex",
    "parse_octal", "parse_decimal", "parse_hex",
    "parse_positive_octal", "parse_positive_decimal", "parse_positive_hex",
    "parse_by_radix", "parse_positive_by_radix",
    # Try
    "try_convert_octal", "try_convert_decimal", "try_convert_hex",
    "try_parse_octal", "try_parse_decimal", "try_parse_hex",
    "try_parse_positive_octal", "try_parse_positive_decimal", "try_parse_positive_hex",
    "try_parse_by_radix", "try_parse_positive_by_radix",
    "get_default_dispatcher",
]
