"""Single-radix converters behind the INumeralConverter protocol."""

from __future__ import annotations

from numeralsys.converters.base import BaseConverter
from numeralsys.converters.decimal import DecimalConverter
from numeralsys.converters.hexadecimal import HexConverter
from numeralsys.converters.octal import OctalConverter

__all__ = ["BaseConverter", "DecimalConverter", "HexConverter", "OctalConverter"]
