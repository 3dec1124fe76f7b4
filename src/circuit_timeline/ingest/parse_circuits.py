"""Validation of raw circuit records.

Records are validated one by one with the Pydantic `Circuit` model so that a
single malformed record is skipped instead of failing the whole batch.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from pydantic import ValidationError

from circuit_timeline.models import Circuit

log = logging.getLogger(__name__)


def parse_circuits(records: Iterable[dict[str, Any]]) -> tuple[list[Circuit], int]:
    """Validate raw records into circuits.

    Args:
        records: Decoded JSON objects describing circuits.

    Returns:
        A tuple of (list_of_valid_circuits, bad_count).
    """
    good: list[Circuit] = []
    bad = 0

    for rec in records:
        try:
            good.append(Circuit.model_validate(rec))
        except ValidationError as e:
            bad += 1
            ident = rec.get("id") if isinstance(rec, dict) else None
            log.warning("Skipping invalid circuit record id=%r: %d error(s)", ident, e.error_count())

    return good, bad


def load_circuits_json(path: Path) -> list[Circuit]:
    """Read a local JSON array of circuit records.

    Args:
        path: Path to a UTF-8 JSON file containing a list of objects.

    Returns:
        The valid circuits in file order.

    Raises:
        RuntimeError: if the file cannot be read, is not valid JSON, or does
            not contain a JSON array.
    """
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise RuntimeError(f"cannot read circuits from {path}: {e}") from e
    if not isinstance(payload, list):
        raise RuntimeError(f"{path} must contain a JSON array of circuits")

    circuits, bad = parse_circuits(payload)
    log.info("Loaded %d circuits from %s (bad=%d)", len(circuits), path, bad)
    return circuits
