"""Render SKU specification payloads as display text."""
from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from .locales import SUPPORTED_LOCALES, locale_fallbacks, normalize_text
from .values import (
    LocalizedTextValue,
    MappingValue,
    NullValue,
    ScalarValue,
    SequenceValue,
    SpecValue,
    classify_value,
    is_localized_object,
)

logger = logging.getLogger(__name__)

ITEM_SEPARATOR = ", "
ENTRY_SEPARATOR = " / "


def _serialise_mapping(raw: Mapping[Any, Any]) -> str:
    try:
        return json.dumps(raw, ensure_ascii=False, separators=(",", ":"))
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Unable to serialise spec value %r: %s", type(raw).__name__, exc)
        return ""


def _text_for_locale(value: LocalizedTextValue, locale: str | None) -> str:
    for code in locale_fallbacks(locale):
        text = render_value(value.translation(code), locale)
        if text:
            return text
    for code in SUPPORTED_LOCALES:
        text = render_value(value.translation(code), locale)
        if text:
            return text
    return ""


def render_value(value: SpecValue, locale: str | None = None) -> str:
    """Render an already classified value."""

    if isinstance(value, SequenceValue):
        parts = (render_value(item, locale) for item in value.items)
        return ITEM_SEPARATOR.join(part for part in parts if part)
    if isinstance(value, NullValue):
        return ""
    if isinstance(value, LocalizedTextValue):
        return _text_for_locale(value, locale)
    if isinstance(value, MappingValue):
        return _serialise_mapping(value.raw)
    if isinstance(value, ScalarValue):
        return value.text
    return ""


def resolve_localized_text(value: Any, locale: str | None = None) -> str:
    """Pick the best translation of a localized object.

    The fallback chain for ``locale`` is tried first; when none of those
    fields has text every supported locale is scanned in declaration order so
    an available translation is never dropped. Values that are not localized
    objects resolve to ``""``.
    """

    try:
        classified = classify_value(value)
        if not isinstance(classified, LocalizedTextValue):
            return ""
        return _text_for_locale(classified, locale)
    except RecursionError:
        logger.debug("Localized value nested too deeply to format")
        return ""


def format_spec_value(value: Any, locale: str | None = None) -> str:
    try:
        return render_value(classify_value(value), locale)
    except RecursionError:
        logger.debug("Spec value nested too deeply to format")
        return ""


def format_sku_spec_values(spec_values: Any, locale: str | None = None) -> str:
    """Format a ``spec_values`` payload as ``"key: value / key: value"``.

    A payload that is itself a localized object renders as a single value
    without key prefix. Entries whose value renders empty are omitted.
    """

    if is_localized_object(spec_values):
        return resolve_localized_text(spec_values, locale)
    if not isinstance(spec_values, Mapping):
        return ""

    parts: list[str] = []
    for key, value in spec_values.items():
        value_text = format_spec_value(value, locale)
        if not value_text:
            continue
        key_text = normalize_text(key)
        parts.append(f"{key_text}: {value_text}" if key_text else value_text)
    return ENTRY_SEPARATOR.join(parts)


__all__ = [
    "ENTRY_SEPARATOR",
    "ITEM_SEPARATOR",
    "format_sku_spec_values",
    "format_spec_value",
    "render_value",
    "resolve_localized_text",
]
