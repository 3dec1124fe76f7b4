"""Concurrent per-location fetching with a join before aggregation.

Every location gets one delayed task per circuit set; all tasks run in a
single `compute` call on the threaded scheduler, so results are only
returned once every fetch has finished. A failing fetch propagates its
exception and nothing is returned.
"""
from __future__ import annotations

import logging
from typing import Any, Sequence, cast

from dask import compute, delayed  # type: ignore[attr-defined]

from circuit_timeline.config import Settings
from circuit_timeline.ingest.fetch_circuits import fetch_active_circuits, fetch_proposed_circuits
from circuit_timeline.models import Circuit

log = logging.getLogger(__name__)


def _flatten(batches: Sequence[list[Circuit]]) -> list[Circuit]:
    return [c for batch in batches for c in batch]


def gather_circuits(
    proposal_id: str,
    location_ids: Sequence[str],
    settings: Settings,
) -> tuple[list[Circuit], list[Circuit]]:
    """Fetch existing and proposed circuits for every location.

    Args:
        proposal_id: Proposal whose circuits are compared.
        location_ids: Locations covered by the proposal.
        settings: API configuration.

    Returns:
        `(existing, proposed)`, each concatenated in location order.
    """
    if not location_ids:
        log.info("No locations given; nothing to fetch.")
        return [], []

    active_tasks = [delayed(fetch_active_circuits)(loc, settings) for loc in location_ids]
    proposed_tasks = [
        delayed(fetch_proposed_circuits)(proposal_id, loc, settings) for loc in location_ids
    ]

    # `compute` is untyped in our environment; cast to Any before calling
    results = cast(Any, compute)(*active_tasks, *proposed_tasks, scheduler="threads")

    n = len(location_ids)
    existing = _flatten(results[:n])
    proposed = _flatten(results[n:])

    log.info(
        "Fetched %d existing and %d proposed circuits across %d location(s)",
        len(existing),
        len(proposed),
        n,
    )
    return existing, proposed
