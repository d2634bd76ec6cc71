"""Shared validation and accumulation for single-radix converters."""

from __future__ import annotations

import logging
import re

from numeralsys.core.exceptions import InvalidFormatError, NullInputError
from numeralsys.core.types import INT32_MAX
from numeralsys.models.result import ParseResult

logger = logging.getLogger(__name__)


class BaseConverter:
    """Common base for the octal, decimal and hex converters.

    Subclasses set ``radix`` and ``pattern``. Input must fully match the
    pattern; digits are accumulated most significant first and a magnitude
    beyond the int32 range is reported as a format error, never wrapped.
    """

    radix: int
    pattern: re.Pattern[str]
    positive_floor: int = 1  # smallest value parse_positive accepts

    def convert(self, source: str) -> int:
        text = self._validate(source, "convert")
        return self._accumulate(text, source=text)

    def parse_positive(self, source: str) -> int:
        value = self.convert(source)
        if value < self.positive_floor:
            raise InvalidFormatError(source, self.radix, f"value {value} is not positive")
        return value

    def try_convert(self, source: str) -> ParseResult:
        self._require_not_none(source, "try_convert")
        try:
            return ParseResult.ok(self.convert(source))
        except InvalidFormatError as exc:
            return self._reject(exc)

    def try_parse_positive(self, source: str) -> ParseResult:
        self._require_not_none(source, "try_parse_positive")
        try:
            value = self.convert(source)
        except InvalidFormatError as exc:
            return self._reject(exc)
        if value <= 0:
            return self._reject(
                InvalidFormatError(source, self.radix, f"value {value} is not positive")
            )
        return ParseResult.ok(value)

    # ------------------------------------------------------------------

    def _digit_value(self, char: str) -> int:
        return ord(char) - ord("0")

    def _accumulate(self, digits: str, *, source: str, limit: int = INT32_MAX) -> int:
        value = 0
        for char in digits:
            value = value * self.radix + self._digit_value(char)
            if value > limit:
                raise InvalidFormatError(
                    source, self.radix, "value does not fit in a 32-bit signed integer"
                )
        return value

    def _require_not_none(self, source: object, operation: str) -> None:
        if source is None:
            raise NullInputError(f"{type(self).__name__}.{operation}")

    def _validate(self, source: object, operation: str) -> str:
        self._require_not_none(source, operation)
        if not isinstance(source, str):
            raise InvalidFormatError(
                source, self.radix, f"expected str, got {type(source).__name__}"
            )
        if not source:
            raise InvalidFormatError(source, self.radix, "empty string")
        if self.pattern.fullmatch(source) is None:
            raise InvalidFormatError(
                source, self.radix, f"contains characters outside the base-{self.radix} alphabet"
            )
        return source

    def _reject(self, exc: InvalidFormatError) -> ParseResult:
        logger.debug(
            "Rejected base-%d numeral %r: %s", exc.radix, exc.source, exc.reason,
            extra={"radix": exc.radix, "source": exc.source, "reason": exc.reason},
        )
        return ParseResult.failed()
