from __future__ import annotations

from datetime import date

from circuit_timeline.timeline.months import (
    HORIZON_MONTHS,
    generate_month_labels,
    month_anchors,
    month_label,
)


def test_month_anchors_keep_day_of_month() -> None:
    anchors = month_anchors(date(2024, 1, 15))
    assert len(anchors) == HORIZON_MONTHS == 36
    assert anchors[0] == date(2024, 1, 15)
    assert anchors[1] == date(2024, 2, 15)
    assert anchors[12] == date(2025, 1, 15)
    assert anchors[35] == date(2026, 12, 15)


def test_month_anchors_clamp_day_overflow() -> None:
    anchors = month_anchors(date(2024, 1, 31), horizon=4)
    assert anchors == [date(2024, 1, 31), date(2024, 2, 29), date(2024, 3, 31), date(2024, 4, 30)]


def test_labels_mark_only_january() -> None:
    labels = generate_month_labels(date(2024, 1, 15))
    assert labels[0] == "2024"
    assert labels[12] == "2025"
    assert labels[24] == "2026"
    assert all(lbl == "" for i, lbl in enumerate(labels) if i not in (0, 12, 24))


def test_labels_mid_year_start() -> None:
    labels = generate_month_labels(date(2026, 10, 17))
    assert labels[:3] == ["", "", ""]
    assert labels[3] == "2027"
    assert labels[15] == "2028"
    assert labels[27] == "2029"
    assert sum(1 for lbl in labels if lbl) == 3


def test_month_label() -> None:
    assert month_label(date(2030, 1, 1)) == "2030"
    assert month_label(date(2030, 12, 31)) == ""
