# guardshift/scheduler.py
from __future__ import annotations

import calendar
import random
from datetime import date, datetime, timedelta
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .models import FREE_POST, FREE_SLOT, POSTS, TIME_SLOTS, WEEKDAYS, ShiftAssignment

# A draw strictly above this gives the guard a shift (~70% of days).
FREE_DAY_THRESHOLD = 0.3

SUMMARY_COLUMNS = ["shifts", "free_days", "hours"]


class InvalidDateError(ValueError):
    """Reference date is neither a date nor an ISO YYYY-MM-DD string."""


# ---------- utils ----------
def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidDateError(f"not an ISO date: {value!r}") from e
    raise InvalidDateError(f"expected a date, got {type(value).__name__}")


def month_bounds(reference_date: Any) -> Tuple[date, date]:
    """First and last calendar day of the month containing reference_date."""
    d = _to_date(reference_date)
    days_in_month = calendar.monthrange(d.year, d.month)[1]
    return d.replace(day=1), d.replace(day=days_in_month)


def _days_between(start: date, end: date) -> Iterable[date]:
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def weekday_name(d: date) -> str:
    # date.weekday() is already Monday=0 .. Sunday=6, the order of WEEKDAYS
    return WEEKDAYS[d.weekday()]


# ---------- generator ----------
def generate_shifts(
    guards: Sequence[Any],
    reference_date: Any,
    rng: Optional[random.Random] = None,
) -> List[ShiftAssignment]:
    """
    One assignment per guard per day of reference_date's month.

    Days ascend in the outer loop, guards keep their input order in the inner one.
    Each (day, guard) gets a single uniform draw: above FREE_DAY_THRESHOLD the
    guard works a random post in an independently random time slot, otherwise
    the day is FREE/Free. Pass a seeded ``random.Random`` as ``rng`` for
    repeatable output.
    """
    rng = rng or random
    first, last = month_bounds(reference_date)

    out: List[ShiftAssignment] = []
    for d in _days_between(first, last):
        day_name = weekday_name(d)
        for guard in guards:
            if rng.random() > FREE_DAY_THRESHOLD:
                post = rng.choice(POSTS)
                slot = rng.choice(TIME_SLOTS)
            else:
                post, slot = FREE_POST, FREE_SLOT
            out.append(
                ShiftAssignment(
                    guardId=guard,
                    date=d,
                    dayOfWeek=day_name,
                    post=post,
                    timeSlot=slot,
                )
            )
    return out


# ---------- reporting ----------
def summarize_shifts(shifts: Sequence[ShiftAssignment], hours_per_shift: int = 8) -> pd.DataFrame:
    """
    Per-guard overview: worked days, free days and total hours.
    Guards are listed in order of first appearance.
    """
    if not shifts:
        return pd.DataFrame(columns=SUMMARY_COLUMNS, dtype="int64").rename_axis("guardId")

    df = pd.DataFrame(
        {
            "guardId": [str(s.guardId) for s in shifts],
            "free": [s.is_free for s in shifts],
        }
    )
    grouped = df.groupby("guardId", sort=False)["free"]
    free_days = grouped.sum().astype("int64")
    summary = pd.DataFrame({"shifts": grouped.size() - free_days, "free_days": free_days})
    summary["hours"] = summary["shifts"] * int(hours_per_shift)
    return summary[SUMMARY_COLUMNS].astype("int64")
