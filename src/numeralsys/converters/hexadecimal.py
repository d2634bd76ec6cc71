"""HexConverter: base-16 numerals, digits 0-9 plus A-F in either case."""

from __future__ import annotations

import re

from numeralsys.converters.base import BaseConverter
from numeralsys.core.types import Radix

_LETTER_DIGITS = {letter: 10 + offset for offset, letter in enumerate("abcdef")}


class HexConverter(BaseConverter):
    """Strict and try conversion of hexadecimal strings.

    Hex input carries no sign, so results lie in [0, 0x7FFFFFFF]. Anything
    larger is raised as InvalidFormatError like any other malformed input.
    """

    radix = Radix.HEXADECIMAL
    pattern = re.compile(r"[0-9A-Fa-f]+")

    def _digit_value(self, char: str) -> int:
        letter_value = _LETTER_DIGITS.get(char.lower())
        if letter_value is not None:
            return letter_value
        return super()._digit_value(char)
