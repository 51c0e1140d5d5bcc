"""Texto de especificación localizado para SKUs de productos."""
from __future__ import annotations

from .locales import (
    DEFAULT_LOCALE,
    SUPPORTED_LOCALES,
    locale_fallbacks,
    normalize_locale_code,
    normalize_text,
)
from .snapshots import (
    SkuSnapshot,
    format_sku_label,
    parse_snapshot,
    resolve_sku_code_from_snapshot,
    resolve_sku_spec_from_snapshot,
)
from .spec_text import format_sku_spec_values, format_spec_value, resolve_localized_text
from .values import classify_value, is_localized_object

__all__ = [
    "DEFAULT_LOCALE",
    "SUPPORTED_LOCALES",
    "SkuSnapshot",
    "classify_value",
    "format_sku_label",
    "format_sku_spec_values",
    "format_spec_value",
    "is_localized_object",
    "locale_fallbacks",
    "normalize_locale_code",
    "normalize_text",
    "parse_snapshot",
    "resolve_localized_text",
    "resolve_sku_code_from_snapshot",
    "resolve_sku_spec_from_snapshot",
]
