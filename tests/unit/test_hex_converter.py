"""Tests for HexConverter."""

from __future__ import annotations

import pytest

from numeralsys.converters.hexadecimal import HexConverter
from numeralsys.core.exceptions import InvalidFormatError, NullInputError
from numeralsys.core.types import INT32_MAX


@pytest.fixture
def hexa():
    return HexConverter()


class TestConvert:
    @pytest.mark.parametrize(
        "source, expected",
        [
            ("0", 0),
            ("9", 9),
            ("a", 10),
            ("F", 15),
            ("Ff", 255),
            ("10", 16),
            ("17", 23),
            ("CAFE", 51966),
            ("cafe", 51966),
            ("000000000001", 1),
            ("7FFFFFFF", INT32_MAX),
        ],
    )
    def test_values(self, hexa, source, expected):
        assert hexa.convert(source) == expected

    def test_every_letter_digit(self, hexa):
        for offset, letter in enumerate("abcdef"):
            assert hexa.convert(letter) == 10 + offset
            assert hexa.convert(letter.upper()) == 10 + offset

    @pytest.mark.parametrize("source", ["G", "0x1F", "-1", "1 2", "", "fg"])
    def test_rejects_invalid_chars(self, hexa, source):
        with pytest.raises(InvalidFormatError):
            hexa.convert(source)

    @pytest.mark.parametrize("source", ["80000000", "FFFFFFFF", "deadBEEF", "100000000"])
    def test_overflow_is_format_error_not_overflow_error(self, hexa, source):
        with pytest.raises(InvalidFormatError) as exc_info:
            hexa.convert(source)
        assert not isinstance(exc_info.value, OverflowError)
        assert "32-bit" in exc_info.value.reason

    def test_none_raises_null_input(self, hexa):
        with pytest.raises(NullInputError):
            hexa.convert(None)


class TestParsePositive:
    def test_positive(self, hexa):
        assert hexa.parse_positive("1A") == 26

    def test_zero_rejected(self, hexa):
        with pytest.raises(InvalidFormatError):
            hexa.parse_positive("00")

    def test_overflow_rejected(self, hexa):
        with pytest.raises(InvalidFormatError):
            hexa.parse_positive("80000000")


class TestTryVariants:
    def test_try_parse_positive(self, hexa):
        assert hexa.try_parse_positive("ff").as_tuple() == (True, 255)

    @pytest.mark.parametrize("source", ["0", "G", "80000000"])
    def test_try_parse_positive_failures(self, hexa, source):
        assert hexa.try_parse_positive(source).as_tuple() == (False, 0)

    def test_try_convert_overflow(self, hexa):
        assert hexa.try_convert("FFFFFFFF").as_tuple() == (False, 0)
