"""OctalConverter: base-8 numerals, digits 0-7, unsigned."""

from __future__ import annotations

import re

from numeralsys.converters.base import BaseConverter
from numeralsys.core.types import Radix


class OctalConverter(BaseConverter):
    """Strict and try conversion of octal strings.

    ``parse_positive`` rejects zero as well as anything that fails ``convert``.
    """

    radix = Radix.OCTAL
    pattern = re.compile(r"[0-7]+")
