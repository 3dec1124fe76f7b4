"""Circuits API client.

Two endpoints are used, both returning a JSON array of circuit records:

- `GET {api_url}/locations/{location_id}/circuits/active`
- `GET {api_url}/proposals/{proposal_id}/locations/{location_id}/circuits`
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests  # type: ignore[import-untyped]

from circuit_timeline.config import Settings
from circuit_timeline.ingest.parse_circuits import parse_circuits
from circuit_timeline.models import Circuit

log = logging.getLogger(__name__)


def active_circuits_url(api_url: str, location_id: str) -> str:
    return f"{api_url}/locations/{quote(str(location_id), safe='')}/circuits/active"


def proposed_circuits_url(api_url: str, proposal_id: str, location_id: str) -> str:
    return (
        f"{api_url}/proposals/{quote(str(proposal_id), safe='')}"
        f"/locations/{quote(str(location_id), safe='')}/circuits"
    )


def _get_json_list(url: str, settings: Settings) -> list[Any]:
    """GET `url` and return the decoded JSON array.

    Raises:
        requests.HTTPError if the remote request fails (non-2xx status).
        RuntimeError if the body is not a JSON array.
    """
    headers = {"Accept": "application/json"}
    if settings.api_token:
        headers["Authorization"] = f"Bearer {settings.api_token}"

    log.info("Fetching %s", url)
    r = requests.get(url, headers=headers, timeout=settings.request_timeout)
    r.raise_for_status()
    payload = r.json()
    if not isinstance(payload, list):
        raise RuntimeError(f"Expected a JSON array from {url}, got {type(payload).__name__}")
    return payload


def fetch_active_circuits(location_id: str, settings: Settings) -> list[Circuit]:
    """Return the circuits currently in place at a location.

    Args:
        location_id: Location identifier.
        settings: API configuration.

    Returns:
        Possibly empty list of valid circuits; invalid records are skipped.
    """
    payload = _get_json_list(active_circuits_url(settings.api_url, location_id), settings)
    circuits, bad = parse_circuits(payload)
    log.info("location=%s active circuits=%d (bad=%d)", location_id, len(circuits), bad)
    return circuits


def fetch_proposed_circuits(proposal_id: str, location_id: str, settings: Settings) -> list[Circuit]:
    """Return the circuits a proposal puts at a location.

    Args:
        proposal_id: Proposal identifier.
        location_id: Location identifier.
        settings: API configuration.

    Returns:
        Possibly empty list of valid circuits; invalid records are skipped.
    """
    url = proposed_circuits_url(settings.api_url, proposal_id, location_id)
    payload = _get_json_list(url, settings)
    circuits, bad = parse_circuits(payload)
    log.info(
        "proposal=%s location=%s proposed circuits=%d (bad=%d)",
        proposal_id,
        location_id,
        len(circuits),
        bad,
    )
    return circuits
