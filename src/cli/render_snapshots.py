"""Render SKU snapshot records as localized display labels."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, Sequence, TextIO

from dotenv import load_dotenv

from ..catalog import (
    format_sku_label,
    resolve_sku_code_from_snapshot,
    resolve_sku_spec_from_snapshot,
)
from ..config import get_settings
from ..logging_config import configure_logging

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")


class SnapshotFileError(RuntimeError):
    """Raised when a snapshot file cannot be read or decoded."""


def _decode_json_lines(content: str, source: str) -> list[Any]:
    records: list[Any] = []
    for number, line in enumerate(content.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            records.append(json.loads(line))
        except json.JSONDecodeError as exc:
            raise SnapshotFileError(
                f"Línea {number} de {source} no es JSON válido: {exc.msg}"
            ) from exc
    return records


def parse_snapshots(content: str, *, source: str = "<stdin>", json_lines: bool = False) -> list[Any]:
    """Decode a JSON array, a single JSON object or JSON Lines into records."""

    if json_lines:
        return _decode_json_lines(content, source)
    try:
        payload = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SnapshotFileError(f"{source} no es JSON válido: {exc.msg}") from exc
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping):
        return [payload]
    raise SnapshotFileError(
        f"{source} debe contener un objeto o una lista de snapshots, no {type(payload).__name__}"
    )


def load_snapshots(
    path: str | None,
    *,
    json_lines: bool = False,
    stdin: TextIO | None = None,
) -> list[Any]:
    """Read snapshots from ``path``; ``None`` or ``"-"`` reads standard input."""

    if not path or path == "-":
        stream = stdin or sys.stdin
        return parse_snapshots(stream.read(), json_lines=json_lines)

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SnapshotFileError(f"No se pudo leer {file_path}: {exc}") from exc
    return parse_snapshots(
        content,
        source=str(file_path),
        json_lines=json_lines or file_path.suffix.lower() == ".jsonl",
    )


def render_snapshot_rows(
    snapshots: Iterable[Any],
    *,
    locale: str | None = None,
    default_label: str | None = None,
) -> list[dict[str, str]]:
    rows: list[dict[str, str]] = []
    skipped = 0
    for snapshot in snapshots:
        if not isinstance(snapshot, Mapping):
            skipped += 1
            continue
        rows.append(
            {
                "sku_code": resolve_sku_code_from_snapshot(snapshot, default_label),
                "spec": resolve_sku_spec_from_snapshot(snapshot, locale),
                "label": format_sku_label(snapshot, locale=locale, default_label=default_label),
            }
        )
    if skipped:
        logger.warning("%s registros omitidos por no ser objetos JSON.", skipped)
    return rows


def write_rows(rows: Sequence[dict[str, str]], output_format: str, stream: TextIO) -> None:
    if output_format == "json":
        json.dump(list(rows), stream, ensure_ascii=False, indent=2)
        stream.write("\n")
        return
    for row in rows:
        stream.write(f"{row['label']}\n")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "path",
        nargs="?",
        default="-",
        help="JSON or JSON Lines file with snapshots; '-' reads stdin",
    )
    parser.add_argument("--locale", help="Locale used to pick translations (e.g. en-US)")
    parser.add_argument(
        "--default-label",
        help="Label shown instead of the DEFAULT sku code",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Output one label per line or a JSON array",
    )
    parser.add_argument(
        "--jsonl",
        action="store_true",
        help="Treat the input as JSON Lines regardless of the file extension",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None, *, stdout: TextIO | None = None) -> None:
    load_dotenv()
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_file)
    args = parse_args(argv)

    locale = args.locale or settings.sku_default_locale
    default_label = (
        args.default_label if args.default_label is not None else settings.sku_default_label
    )

    try:
        snapshots = load_snapshots(args.path, json_lines=args.jsonl)
    except SnapshotFileError as exc:
        logger.error("%s", exc)
        raise SystemExit(f"error: {exc}") from exc

    rows = render_snapshot_rows(snapshots, locale=locale, default_label=default_label)
    write_rows(rows, args.output_format, stdout or sys.stdout)
    logger.info("Rendered %s snapshots (locale=%s)", len(rows), locale)


if __name__ == "__main__":
    main()
