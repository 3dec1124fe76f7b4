from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from circuit_timeline.models import SERIES_FIELDS, Circuit, CircuitSet, CircuitType, MonthBucket


@pytest.mark.parametrize(
    "label, expected",
    [
        ("MPLS", CircuitType.MPLS),
        ("mpls", CircuitType.MPLS),
        ("D.I.A", CircuitType.DIA),
        ("Broad band", CircuitType.BROADBAND),
        ("LTE-4G", None),
        ("Dedicated Internet Access", None),
        ("", None),
        (None, None),
    ],
)
def test_circuit_type_from_label(label: str | None, expected: CircuitType | None) -> None:
    assert CircuitType.from_label(label) is expected


def test_circuit_accepts_api_record() -> None:
    c = Circuit.model_validate(
        {
            "id": 42,
            "type": "Broadband",
            "monthlycost": "89.5",
            "contract_start_date": "2024-01-15T00:00:00Z",
            "contract_end_date": "",
            "location_id": "loc-1",
        }
    )
    assert c.id == "42"
    assert c.monthly_cost == 89.5
    assert c.contract_start_date == date(2024, 1, 15)
    assert c.contract_end_date is None
    assert c.circuit_type is CircuitType.BROADBAND


def test_unparsable_date_becomes_missing() -> None:
    c = Circuit.model_validate(
        {"id": "x", "type": "DIA", "monthly_cost": 10, "contract_start_date": "soon"}
    )
    assert c.contract_start_date is None


def test_circuit_rejects_negative_cost() -> None:
    with pytest.raises(ValidationError):
        Circuit.model_validate({"id": "x", "type": "DIA", "monthly_cost": -1})


def test_month_bucket_defaults_and_record() -> None:
    b = MonthBucket(index=0, month=date(2024, 1, 15), label="2024")
    assert set(b.totals) == set(SERIES_FIELDS)
    assert all(v == 0.0 for v in b.totals.values())

    rec = b.to_record()
    assert list(rec) == [
        "label",
        "existingMpls",
        "existingDia",
        "existingBroadband",
        "existingLte",
        "proposedMpls",
        "proposedDia",
        "proposedBroadband",
        "proposedLte",
    ]
    assert rec["label"] == "2024"
    assert b.set_total(CircuitSet.PROPOSED) == 0.0


@pytest.mark.parametrize("cost", [float("inf"), float("nan")])
def test_circuit_rejects_non_finite_cost(cost: float) -> None:
    with pytest.raises(ValidationError):
        Circuit.model_validate({"id": "x", "type": "DIA", "monthly_cost": cost})


def test_month_bucket_is_hashable_and_read_only() -> None:
    a = MonthBucket(index=3, month=date(2024, 4, 15), label="")
    b = MonthBucket(index=3, month=date(2024, 4, 15), label="")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b}) == 1
    with pytest.raises(TypeError):
        a.totals[(CircuitSet.EXISTING, CircuitType.MPLS)] = 1.0  # type: ignore[index]
