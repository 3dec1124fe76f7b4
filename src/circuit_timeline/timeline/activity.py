"""Activity predicate: is a circuit billed in a given month?"""

from __future__ import annotations

from datetime import date, datetime

from circuit_timeline.models import Circuit


def is_active(circuit: Circuit, month_anchor: date) -> bool:
    """Return True if the circuit's contract covers `month_anchor`.

    Activity is sampled once per month, at the month's representative day,
    and both contract bounds are inclusive. A circuit without a start date is
    never active; one without an end date is active from its start onward.
    A start after the end is never active.

    Args:
        circuit: Circuit to check.
        month_anchor: Representative day of the month (datetimes are
            compared by calendar date).
    """
    if isinstance(month_anchor, datetime):
        month_anchor = month_anchor.date()

    start = circuit.contract_start_date
    if start is None:
        return False

    end = circuit.contract_end_date
    if end is None:
        return start <= month_anchor

    return start <= month_anchor <= end
