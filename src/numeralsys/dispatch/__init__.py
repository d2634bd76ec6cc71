"""Radix dispatch over the octal, decimal and hex converters."""

from __future__ import annotations

from numeralsys.core.config import ParserSettings
from numeralsys.dispatch.radix_dispatcher import RadixDispatcher, is_supported_radix


def create_dispatcher(settings: ParserSettings | None = None) -> RadixDispatcher:
    """Create a dispatcher wired with the default converters.

    Returns:
        RadixDispatcher configured from ``settings`` (env-derived when None).
    """
    if settings is None:
        settings = ParserSettings()
    return RadixDispatcher(settings=settings)


__all__ = ["RadixDispatcher", "create_dispatcher", "is_supported_radix"]
