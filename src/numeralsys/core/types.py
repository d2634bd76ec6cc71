"""Radix enum and int32 bounds used across numeralsys."""

from __future__ import annotations

from enum import IntEnum


class Radix(IntEnum):
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


SUPPORTED_RADIXES = frozenset(Radix)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
