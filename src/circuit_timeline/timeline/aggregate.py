"""Aggregation of circuit costs into monthly buckets.

`aggregate` is a pure function of its inputs and the anchor date: every call
rebuilds the full horizon from scratch and never mutates the circuits.

Output:
- A list of `MonthBucket`, one per month, in ascending month order
- `projection_records` / `projection_frame` flatten it for charting and CSV
"""
from __future__ import annotations

import logging
from collections import Counter
from datetime import date
from typing import Any, Iterable, Sequence

import pandas as pd

from circuit_timeline.models import SERIES_FIELDS, Circuit, CircuitSet, CircuitType, MonthBucket
from circuit_timeline.timeline.activity import is_active
from circuit_timeline.timeline.months import HORIZON_MONTHS, month_anchors, month_label

log = logging.getLogger(__name__)


def _classify(circuits: Iterable[Circuit], dropped: Counter[str]) -> list[tuple[Circuit, CircuitType]]:
    """Pair each circuit with its known type; count the ones without one."""
    typed: list[tuple[Circuit, CircuitType]] = []
    for c in circuits:
        ctype = c.circuit_type
        if ctype is None:
            dropped[c.type] += 1
            continue
        typed.append((c, ctype))
    return typed


def aggregate(
    existing: Sequence[Circuit],
    proposed: Sequence[Circuit],
    start: date | None = None,
) -> list[MonthBucket]:
    """Build the 36-month cost projection.

    For every month, each active circuit adds its monthly cost to the slot
    for its set and type. Circuits with unrecognised types contribute
    nothing.

    Args:
        existing: Circuits already in place.
        proposed: Circuits attached to the proposal.
        start: Anchor date; defaults to today.

    Returns:
        List of exactly 36 `MonthBucket` in month order.
    """
    anchor = start if start is not None else date.today()

    dropped: Counter[str] = Counter()
    sides = [
        (CircuitSet.EXISTING, _classify(existing, dropped)),
        (CircuitSet.PROPOSED, _classify(proposed, dropped)),
    ]
    for label, n in dropped.items():
        log.debug("Ignoring %d circuit(s) with unrecognised type %r", n, label)

    buckets: list[MonthBucket] = []
    for i, month in enumerate(month_anchors(anchor, HORIZON_MONTHS)):
        totals = {slot: 0.0 for slot in SERIES_FIELDS}
        for circuit_set, typed in sides:
            for circuit, ctype in typed:
                if is_active(circuit, month):
                    totals[(circuit_set, ctype)] += circuit.monthly_cost
        buckets.append(MonthBucket(index=i, month=month, label=month_label(month), totals=totals))

    log.info(
        "Projected %d months from %s (existing=%d proposed=%d dropped=%d)",
        len(buckets),
        anchor.isoformat(),
        len(existing),
        len(proposed),
        sum(dropped.values()),
    )
    return buckets


def projection_records(buckets: Sequence[MonthBucket]) -> list[dict[str, Any]]:
    """Return chart-ready records (`label` plus the eight series fields)."""
    return [b.to_record() for b in buckets]


def projection_frame(buckets: Sequence[MonthBucket]) -> pd.DataFrame:
    """Return the projection as a DataFrame, one row per month.

    Columns: `month_index`, `month`, `label` and one column per series
    field in `SERIES_FIELDS` order.
    """
    columns = ["month_index", "month", "label", *SERIES_FIELDS.values()]
    rows = []
    for b in buckets:
        row = {"month_index": b.index, "month": b.month}
        row.update(b.to_record())
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)
