"""RadixDispatcher: one entry point for octal, decimal and hex conversion."""

from __future__ import annotations

import logging

from numeralsys.converters.decimal import DecimalConverter
from numeralsys.converters.hexadecimal import HexConverter
from numeralsys.converters.octal import OctalConverter
from numeralsys.core.config import ParserSettings
from numeralsys.core.exceptions import InvalidFormatError, InvalidRadixError, NullInputError
from numeralsys.core.protocols import INumeralConverter
from numeralsys.core.types import SUPPORTED_RADIXES, Radix
from numeralsys.models.result import ParseResult

logger = logging.getLogger(__name__)


def is_supported_radix(radix: object) -> bool:
    """True for exactly the ints 8, 10 and 16 (bools excluded)."""
    if isinstance(radix, bool) or not isinstance(radix, int):
        return False
    return radix in SUPPORTED_RADIXES


class RadixDispatcher:
    """Routes a source string to the converter for a runtime radix.

    Settings are read once at construction, so a dispatcher is immutable and
    safe to share between threads. ``parse`` and ``try_parse`` apply the octal
    sentinel guard: a base-8 result equal to ``settings.sentinel.octal_value``
    is rejected even though the input is a well-formed octal numeral.
    """

    def __init__(
        self,
        *,
        settings: ParserSettings | None = None,
        octal: INumeralConverter | None = None,
        decimal: INumeralConverter | None = None,
        hexadecimal: INumeralConverter | None = None,
    ) -> None:
        self._settings = settings if settings is not None else ParserSettings()
        self._sentinel_enabled = self._settings.sentinel.enabled
        self._sentinel_value = self._settings.sentinel.octal_value
        self._decimal = decimal if decimal is not None else DecimalConverter()
        self._converters: dict[int, INumeralConverter] = {
            Radix.OCTAL: octal if octal is not None else OctalConverter(),
            Radix.DECIMAL: self._decimal,
            Radix.HEXADECIMAL: hexadecimal if hexadecimal is not None else HexConverter(),
        }

    @property
    def settings(self) -> ParserSettings:
        return self._settings

    def converter_for(self, radix: int) -> INumeralConverter:
        """Return the converter for ``radix``; decimal is the fallback branch."""
        if not is_supported_radix(radix):
            raise InvalidRadixError(radix)
        return self._converters.get(radix, self._decimal)

    def parse(self, source: str, radix: int) -> int:
        converter = self._route(source, radix, "parse")
        value = converter.convert(source)
        if self._is_sentinel(value, radix):
            raise InvalidFormatError(source, radix, f"octal value {value} is reserved")
        return value

    def parse_positive(self, source: str, radix: int) -> int:
        return self._route(source, radix, "parse_positive").parse_positive(source)

    def try_parse(self, source: str, radix: int) -> ParseResult:
        result = self._route(source, radix, "try_parse").try_convert(source)
        if result.success and self._is_sentinel(result.value, radix):
            logger.debug(
                "Rejected reserved octal value %d from %r", result.value, source,
                extra={"radix": radix, "source": source, "reason": "sentinel"},
            )
            return ParseResult.failed()
        return result

    def try_parse_positive(self, source: str, radix: int) -> ParseResult:
        return self._route(source, radix, "try_parse_positive").try_parse_positive(source)

    # ------------------------------------------------------------------

    def _route(self, source: object, radix: int, operation: str) -> INumeralConverter:
        if source is None:
            raise NullInputError(f"{type(self).__name__}.{operation}")
        return self.converter_for(radix)

    def _is_sentinel(self, value: int, radix: int) -> bool:
        return (
            self._sentinel_enabled
            and radix == Radix.OCTAL
            and value == self._sentinel_value
        )
