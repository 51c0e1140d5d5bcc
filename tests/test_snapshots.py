from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.catalog import (
    SkuSnapshot,
    format_sku_label,
    parse_snapshot,
    resolve_sku_code_from_snapshot,
    resolve_sku_spec_from_snapshot,
)


@pytest.fixture()
def snapshot() -> dict[str, object]:
    return {
        "sku_id": 991,
        "sku_code": "  ABC-123 ",
        "spec_values": {
            "color": {"zh-CN": "红色", "zh-TW": "紅色", "en-US": "Red"},
            "size": "XL",
        },
    }


def test_sku_code_preserves_casing(snapshot: dict[str, object]) -> None:
    assert resolve_sku_code_from_snapshot(snapshot) == "ABC-123"
    assert resolve_sku_code_from_snapshot({"sku_code": "abc-123"}) == "abc-123"


def test_default_sentinel_uses_label() -> None:
    assert resolve_sku_code_from_snapshot({"sku_code": "default"}, "Standard") == "Standard"
    assert resolve_sku_code_from_snapshot({"sku_code": " DEFAULT "}, "  Única ") == "Única"
    assert resolve_sku_code_from_snapshot({"sku_code": "Default"}) == ""


@pytest.mark.parametrize(
    "payload",
    [None, [], ["ABC"], "ABC-123", 7, {}, {"sku_code": "   "}, {"sku_code": None}],
)
def test_sku_code_missing_or_invalid(payload: object) -> None:
    assert resolve_sku_code_from_snapshot(payload, "Standard") == ""


def test_sku_code_accepts_numbers() -> None:
    assert resolve_sku_code_from_snapshot({"sku_code": 1001}) == "1001"


def test_sku_spec_from_snapshot(snapshot: dict[str, object]) -> None:
    assert resolve_sku_spec_from_snapshot(snapshot, "en-US") == "color: Red / size: XL"
    assert resolve_sku_spec_from_snapshot(snapshot, "zh-TW") == "color: 紅色 / size: XL"
    assert resolve_sku_spec_from_snapshot(snapshot) == "color: 红色 / size: XL"


@pytest.mark.parametrize("payload", [None, ["spec"], "spec", {}, {"spec_values": "XL"}])
def test_sku_spec_from_invalid_snapshot(payload: object) -> None:
    assert resolve_sku_spec_from_snapshot(payload, "en-US") == ""


def test_sku_spec_from_localized_payload() -> None:
    row = {"sku_code": "DEFAULT", "spec_values": {"zh-CN": "默认", "en-US": "Default"}}
    assert resolve_sku_spec_from_snapshot(row, "en") == "Default"


def test_parse_snapshot_builds_model(snapshot: dict[str, object]) -> None:
    model = parse_snapshot(snapshot)
    assert isinstance(model, SkuSnapshot)
    assert model.sku_code == "ABC-123"
    assert model.is_default_sku is False
    assert parse_snapshot(model) is model
    assert parse_snapshot(["ABC"]) is None


def test_readers_accept_models() -> None:
    model = SkuSnapshot(sku_code="default", spec_values={"size": "M"})
    assert model.is_default_sku is True
    assert resolve_sku_code_from_snapshot(model, "Estándar") == "Estándar"
    assert resolve_sku_spec_from_snapshot(model) == "size: M"


def test_format_sku_label(snapshot: dict[str, object]) -> None:
    assert format_sku_label(snapshot, locale="en-US") == "ABC-123 (color: Red / size: XL)"
    assert format_sku_label({"sku_code": "X-1"}) == "X-1"
    assert format_sku_label({"spec_values": {"size": "M"}}) == "size: M"
    assert (
        format_sku_label({"sku_code": "DEFAULT", "spec_values": {}}, default_label="Standard")
        == "Standard"
    )
    assert format_sku_label(None) == ""
