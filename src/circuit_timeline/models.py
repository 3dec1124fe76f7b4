"""Pydantic models and value types for circuits and monthly buckets.

`Circuit` validates records coming from the circuits API at ingestion time.
`MonthBucket` holds the aggregated totals for one month of the projection.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

log = logging.getLogger(__name__)

_NON_ALPHA_RE = re.compile(r"[^a-zA-Z]")


class CircuitType(str, Enum):
    """Circuit types that appear in the projection."""
    MPLS = "MPLS"
    DIA = "DIA"
    BROADBAND = "Broadband"
    LTE = "LTE"

    @classmethod
    def from_label(cls, label: str | None) -> CircuitType | None:
        """Map a free-text type label to a known type.

        Non-letters are stripped and the remainder is matched
        case-insensitively, so "D.I.A" is DIA but "Dedicated Internet Access"
        matches nothing.

        Returns:
            The matching `CircuitType`, or None for unrecognised labels.
        """
        if not label:
            return None
        key = _NON_ALPHA_RE.sub("", label).lower()
        return _TYPES_BY_KEY.get(key)


_TYPES_BY_KEY = {t.value.lower(): t for t in CircuitType}


class CircuitSet(str, Enum):
    """Which side of the comparison a circuit belongs to."""
    EXISTING = "existing"
    PROPOSED = "proposed"


# Output field for every (set, type) slot, in chart stacking order.
SERIES_FIELDS: dict[tuple[CircuitSet, CircuitType], str] = {
    (CircuitSet.EXISTING, CircuitType.MPLS): "existingMpls",
    (CircuitSet.EXISTING, CircuitType.DIA): "existingDia",
    (CircuitSet.EXISTING, CircuitType.BROADBAND): "existingBroadband",
    (CircuitSet.EXISTING, CircuitType.LTE): "existingLte",
    (CircuitSet.PROPOSED, CircuitType.MPLS): "proposedMpls",
    (CircuitSet.PROPOSED, CircuitType.DIA): "proposedDia",
    (CircuitSet.PROPOSED, CircuitType.BROADBAND): "proposedBroadband",
    (CircuitSet.PROPOSED, CircuitType.LTE): "proposedLte",
}


class Circuit(BaseModel):
    """Schema for a billable circuit as returned by the circuits API.

    Attributes:
        id: Opaque circuit identifier.
        type: Type label as received (e.g. 'MPLS', 'Broadband').
        monthly_cost: Non-negative monthly cost; also read from `monthlycost`.
        contract_start_date: First day of the contract, if known.
        contract_end_date: Last day of the contract; None means open-ended.
    """
    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)
    id: str
    type: str
    monthly_cost: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        validation_alias=AliasChoices("monthly_cost", "monthlycost"),
    )
    contract_start_date: date | None = None
    contract_end_date: date | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("contract_start_date", "contract_end_date", mode="before")
    @classmethod
    def _lenient_date(cls, v: Any) -> date | None:
        """Parse ISO dates/datetimes; anything unparsable becomes None."""
        if v is None:
            return None
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, date):
            return v
        if isinstance(v, str):
            text = v.strip()
            if not text:
                return None
            try:
                return date.fromisoformat(text[:10])
            except ValueError:
                pass
        log.warning("Unparsable contract date %r treated as missing", v)
        return None

    @property
    def circuit_type(self) -> CircuitType | None:
        return CircuitType.from_label(self.type)


def _zero_totals() -> dict[tuple[CircuitSet, CircuitType], float]:
    return {slot: 0.0 for slot in SERIES_FIELDS}


@dataclass(frozen=True)
class MonthBucket:
    """Aggregated circuit costs for one month of the projection.

    Attributes:
        index: Month offset from the anchor date (0-based).
        month: Representative date the month was sampled at.
        label: Four-digit year for January, empty string otherwise.
        totals: Cost per (set, type) slot; every slot is present. Stored as
            a read-only mapping and left out of the hash.
    """
    index: int
    month: date
    label: str
    totals: Mapping[tuple[CircuitSet, CircuitType], float] = field(
        default_factory=_zero_totals, hash=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "totals", MappingProxyType(dict(self.totals)))

    def total(self, circuit_set: CircuitSet, circuit_type: CircuitType) -> float:
        return self.totals[(circuit_set, circuit_type)]

    def set_total(self, circuit_set: CircuitSet) -> float:
        """Sum of all types within one set for this month."""
        return sum(v for (s, _), v in self.totals.items() if s is circuit_set)

    def to_record(self) -> dict[str, Any]:
        """Flat chart record: `label` plus one numeric field per slot."""
        rec: dict[str, Any] = {"label": self.label}
        for slot, name in SERIES_FIELDS.items():
            rec[name] = self.totals[slot]
        return rec
