"""Outcome model returned by the non-raising try-variants."""

from __future__ import annotations

from pydantic import BaseModel, model_validator


class ParseResult(BaseModel):
    """Success flag plus converted value; a failed result always holds 0."""

    model_config = {"frozen": True}

    success: bool = False
    value: int = 0

    @model_validator(mode="after")
    def _failed_value_is_zero(self) -> ParseResult:
        if not self.success and self.value != 0:
            raise ValueError(f"failed ParseResult must hold 0, got {self.value}")
        return self

    @classmethod
    def ok(cls, value: int) -> ParseResult:
        return cls(success=True, value=value)

    @classmethod
    def failed(cls) -> ParseResult:
        return cls(success=False, value=0)

    def as_tuple(self) -> tuple[bool, int]:
        return self.success, self.value

    def __bool__(self) -> bool:
        return self.success
