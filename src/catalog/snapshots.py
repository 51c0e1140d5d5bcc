"""Lectura de código y especificación desde snapshots de SKU."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .locales import normalize_text
from .spec_text import format_sku_spec_values

logger = logging.getLogger(__name__)

DEFAULT_SKU_SENTINEL = "DEFAULT"


class SkuSnapshot(BaseModel):
    """Copia del SKU guardada junto a una línea de pedido."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    sku_code: str = Field("", description="Código libre del SKU; puede ser el centinela DEFAULT")
    spec_values: Any = Field(
        None, description="Valores de especificación, localizados o por atributo"
    )

    @field_validator("sku_code", mode="before")
    @classmethod
    def _normalise_code(cls, value: Any) -> str:
        return normalize_text(value)

    @property
    def is_default_sku(self) -> bool:
        """El SKU es la variante única por defecto del producto."""

        return self.sku_code.upper() == DEFAULT_SKU_SENTINEL


def parse_snapshot(snapshot: Any) -> SkuSnapshot | None:
    """Return a :class:`SkuSnapshot` for mappings, ``None`` for anything else."""

    if isinstance(snapshot, SkuSnapshot):
        return snapshot
    if not isinstance(snapshot, Mapping):
        return None
    try:
        return SkuSnapshot.model_validate(
            {"sku_code": snapshot.get("sku_code"), "spec_values": snapshot.get("spec_values")}
        )
    except ValidationError as exc:
        logger.debug("Snapshot de SKU descartado: %s", exc)
        return None


def resolve_sku_code_from_snapshot(snapshot: Any, default_label: Any = None) -> str:
    """Devuelve el código visible del SKU.

    El centinela ``DEFAULT`` (sin distinguir mayúsculas) se reemplaza por
    ``default_label``; cualquier otro código se devuelve recortado y con su
    capitalización original.
    """

    row = parse_snapshot(snapshot)
    if row is None or not row.sku_code:
        return ""
    if row.is_default_sku:
        return normalize_text(default_label)
    return row.sku_code


def resolve_sku_spec_from_snapshot(snapshot: Any, locale: str | None = None) -> str:
    row = parse_snapshot(snapshot)
    if row is None:
        return ""
    return format_sku_spec_values(row.spec_values, locale)


def format_sku_label(
    snapshot: Any,
    *,
    locale: str | None = None,
    default_label: Any = None,
) -> str:
    """Etiqueta combinada ``CODIGO (especificación)`` para listados."""

    code = resolve_sku_code_from_snapshot(snapshot, default_label)
    spec = resolve_sku_spec_from_snapshot(snapshot, locale)
    if code and spec:
        return f"{code} ({spec})"
    return code or spec


__all__ = [
    "DEFAULT_SKU_SENTINEL",
    "SkuSnapshot",
    "format_sku_label",
    "parse_snapshot",
    "resolve_sku_code_from_snapshot",
    "resolve_sku_spec_from_snapshot",
]
