"""DecimalConverter: base-10 numerals with an optional leading minus sign."""

from __future__ import annotations

import re

from numeralsys.converters.base import BaseConverter
from numeralsys.core.exceptions import InvalidFormatError
from numeralsys.core.types import INT32_MAX, Radix
from numeralsys.models.result import ParseResult


class DecimalConverter(BaseConverter):
    """Strict and try conversion of decimal strings.

    Positivity is checked differently on the two paths:

    - ``parse_positive`` only rejects negatives, so ``"0"``, ``"-0"`` and a
      lone ``"-"`` all yield 0.
    - ``try_parse_positive`` refuses any sign and reports zero as a failure.
    """

    radix = Radix.DECIMAL
    pattern = re.compile(r"-?[0-9]*")
    unsigned_pattern = re.compile(r"[0-9]+")
    positive_floor = 0

    def convert(self, source: str) -> int:
        text = self._validate(source, "convert")
        if text.startswith("-"):
            # -2**31 has no positive int32 counterpart
            return -self._accumulate(text[1:], source=text, limit=INT32_MAX + 1)
        return self._accumulate(text, source=text)

    def try_parse_positive(self, source: str) -> ParseResult:
        self._require_not_none(source, "try_parse_positive")
        if not isinstance(source, str) or self.unsigned_pattern.fullmatch(source) is None:
            return self._reject(
                InvalidFormatError(source, self.radix, "expected unsigned decimal digits")
            )
        return super().try_parse_positive(source)
