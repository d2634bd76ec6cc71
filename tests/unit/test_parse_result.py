"""Tests for the ParseResult model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from numeralsys.models.result import ParseResult


def test_ok_result():
    result = ParseResult.ok(42)
    assert result.success is True
    assert result.value == 42
    assert bool(result)


def test_failed_result_holds_zero():
    result = ParseResult.failed()
    assert result.as_tuple() == (False, 0)
    assert not result


def test_ok_zero_is_still_truthy():
    assert ParseResult.ok(0)


def test_results_compare_by_value():
    assert ParseResult.ok(7) == ParseResult(success=True, value=7)


def test_result_is_frozen():
    result = ParseResult.ok(1)
    with pytest.raises(ValidationError):
        result.value = 2


def test_failed_result_with_value_is_rejected():
    with pytest.raises(ValidationError, match="must hold 0"):
        ParseResult(success=False, value=5)


def test_default_result_is_failed_zero():
    assert ParseResult().as_tuple() == (False, 0)
