from __future__ import annotations

from datetime import date, datetime

from circuit_timeline.models import Circuit
from circuit_timeline.timeline.activity import is_active


def _circuit(start: str | None, end: str | None = None) -> Circuit:
    return Circuit(
        id="c1",
        type="MPLS",
        monthly_cost=100,
        contract_start_date=start,
        contract_end_date=end,
    )


def test_missing_start_is_never_active() -> None:
    c = _circuit(None, "2030-01-01")
    assert not is_active(c, date(2024, 6, 1))
    assert not is_active(c, date(2029, 6, 1))


def test_open_ended_contract() -> None:
    c = _circuit("2024-03-15")
    assert not is_active(c, date(2024, 3, 14))
    assert is_active(c, date(2024, 3, 15))
    assert is_active(c, date(2099, 1, 1))


def test_bounds_are_inclusive() -> None:
    c = _circuit("2024-03-15", "2024-05-15")
    assert is_active(c, date(2024, 3, 15))
    assert is_active(c, date(2024, 5, 15))
    assert not is_active(c, date(2024, 5, 16))
    assert not is_active(c, date(2024, 3, 14))


def test_single_sample_per_month() -> None:
    # Contract starts on the 20th; sampling on the 15th misses that month.
    c = _circuit("2024-03-20", "2024-04-10")
    assert not is_active(c, date(2024, 3, 15))
    assert not is_active(c, date(2024, 4, 15))


def test_start_after_end_is_never_active() -> None:
    c = _circuit("2024-06-01", "2024-01-01")
    for m in (date(2023, 12, 1), date(2024, 3, 1), date(2024, 7, 1)):
        assert not is_active(c, m)


def test_datetime_anchor_compared_by_date() -> None:
    c = _circuit("2024-03-15", "2024-03-15")
    assert is_active(c, datetime(2024, 3, 15, 23, 59))
