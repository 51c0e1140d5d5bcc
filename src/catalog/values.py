"""Clasificación de los valores de especificación recibidos en los snapshots.

Los payloads llegan sin tipo (JSON decodificado). Se clasifican una sola vez en
una de las variantes de :data:`SpecValue` y el formateo trabaja sobre ellas.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .locales import SUPPORTED_LOCALES, is_supported_locale, normalize_text

SEQUENCE_TYPES = (list, tuple)


@dataclass(frozen=True)
class NullValue:
    pass


@dataclass(frozen=True)
class ScalarValue:
    text: str


@dataclass(frozen=True)
class SequenceValue:
    items: tuple["SpecValue", ...]


@dataclass(frozen=True)
class LocalizedTextValue:
    """Valores por código de idioma, en el orden de los idiomas soportados."""

    translations: tuple[tuple[str, "SpecValue"], ...]

    def translation(self, code: str) -> "SpecValue":
        for locale, value in self.translations:
            if locale == code:
                return value
        return NullValue()


@dataclass(frozen=True, eq=False)
class MappingValue:
    """Objeto genérico; conserva el payload original para serializarlo."""

    raw: Mapping[Any, Any]


SpecValue = Union[NullValue, ScalarValue, SequenceValue, LocalizedTextValue, MappingValue]


def is_localized_object(value: Any) -> bool:
    """Indica si ``value`` es un mapeo indexado únicamente por idiomas soportados."""

    if not isinstance(value, Mapping) or not value:
        return False
    return all(is_supported_locale(key) for key in value)


def _localized(value: Mapping[Any, Any], active: frozenset[int]) -> LocalizedTextValue:
    return LocalizedTextValue(
        translations=tuple(
            (code, classify_value(value[code], _active=active))
            for code in SUPPORTED_LOCALES
            if code in value
        )
    )


def classify_value(value: Any, *, _active: frozenset[int] = frozenset()) -> SpecValue:
    """Clasifica un valor arbitrario en una variante de :data:`SpecValue`.

    Los campos de un objeto localizado se clasifican también, así una lista
    traducida se formatea igual que una lista suelta. Un contenedor que se
    contiene a sí mismo se clasifica como :class:`NullValue` en la repetición,
    de modo que el formateo termina.
    """

    if isinstance(value, SEQUENCE_TYPES):
        marker = id(value)
        if marker in _active:
            return NullValue()
        active = _active | {marker}
        return SequenceValue(items=tuple(classify_value(item, _active=active) for item in value))
    if value is None:
        return NullValue()
    if isinstance(value, Mapping):
        if not is_localized_object(value):
            return MappingValue(raw=value)
        marker = id(value)
        if marker in _active:
            return NullValue()
        return _localized(value, _active | {marker})
    return ScalarValue(text=normalize_text(value))


__all__ = [
    "LocalizedTextValue",
    "MappingValue",
    "NullValue",
    "ScalarValue",
    "SequenceValue",
    "SpecValue",
    "classify_value",
    "is_localized_object",
]
