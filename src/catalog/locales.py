"""Supported locales and the fallback order used to pick a translation."""
from __future__ import annotations

import math
from typing import Any

SUPPORTED_LOCALES: tuple[str, ...] = ("zh-CN", "zh-TW", "en-US")
DEFAULT_LOCALE = SUPPORTED_LOCALES[0]

_TRADITIONAL_CHAIN = ("zh-TW", "zh-CN", "en-US")
_ENGLISH_CHAIN = ("en-US", "zh-CN", "zh-TW")
_DEFAULT_CHAIN = ("zh-CN", "zh-TW", "en-US")

LOCALE_FALLBACKS: dict[str, tuple[str, ...]] = {
    "zh-tw": _TRADITIONAL_CHAIN,
    "zh-hk": _TRADITIONAL_CHAIN,
    "zh-mo": _TRADITIONAL_CHAIN,
    "en": _ENGLISH_CHAIN,
    "en-us": _ENGLISH_CHAIN,
}


def normalize_text(value: Any) -> str:
    """Return ``value`` as trimmed text, ``""`` for ``None``.

    Booleans and floats are rendered the way JSON producers emit them
    (``true``, ``3``, ``NaN``, ``-Infinity``) so payloads decoded from JSON
    print back unchanged.
    """

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value).strip()


def normalize_locale_code(locale: Any = None) -> str:
    return normalize_text(locale).lower()


def locale_fallbacks(locale: Any = None) -> tuple[str, ...]:
    """Return the ordered locale codes to try for ``locale``.

    Matching is case-insensitive. Unknown, empty or ``None`` locales use the
    simplified Chinese chain. The result always lists every supported locale
    exactly once.
    """

    return LOCALE_FALLBACKS.get(normalize_locale_code(locale), _DEFAULT_CHAIN)


def is_supported_locale(code: Any) -> bool:
    return isinstance(code, str) and code in SUPPORTED_LOCALES


__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_FALLBACKS",
    "SUPPORTED_LOCALES",
    "is_supported_locale",
    "locale_fallbacks",
    "normalize_locale_code",
    "normalize_text",
]
