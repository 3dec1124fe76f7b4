"""Month sequence for the projection horizon.

Months are advanced with pandas calendar offsets, so day overflow clamps to
the last valid day of the target month (Jan 31 + 1 month = Feb 28/29).
"""

from __future__ import annotations

from datetime import date

import pandas as pd

HORIZON_MONTHS = 36


def month_anchors(start: date, horizon: int = HORIZON_MONTHS) -> list[date]:
    """Return the representative date of each month in the horizon.

    Element `i` is `start` advanced by `i` calendar months, keeping the same
    day-of-month where it exists.

    Args:
        start: Anchor date (usually today).
        horizon: Number of months to produce (default 36).

    Returns:
        List of `horizon` dates in ascending order.
    """
    base = pd.Timestamp(start)
    return [(base + pd.DateOffset(months=i)).date() for i in range(horizon)]


def month_label(month: date) -> str:
    """Axis label for a month: the year on January, blank otherwise."""
    return f"{month.year:04d}" if month.month == 1 else ""


def generate_month_labels(start: date, horizon: int = HORIZON_MONTHS) -> list[str]:
    return [month_label(m) for m in month_anchors(start, horizon)]
