"""Quota-week and slot time arithmetic under the configured UTC offset."""

import re
from datetime import date, datetime, timedelta, timezone

from app.models import WEEKDAYS

_OFFSET_RE = re.compile(r'^([+-])(\d{2}):?(\d{2})$')


def parse_offset(value):
    """Turn '+05:30' (or '-0400') into a fixed ``timezone``."""
    match = _OFFSET_RE.match(value.strip())
    if not match:
        raise ValueError(f'Invalid UTC offset: {value!r}')
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    if sign == '-':
        delta = -delta
    return timezone(delta)


def weekday_index(name):
    """Python weekday index (Monday == 0) for a case-insensitive day name."""
    lookup = [d.lower() for d in WEEKDAYS]
    try:
        return lookup.index(name.lower())
    except ValueError:
        raise ValueError(f'Unknown weekday: {name!r}') from None


def now_in(tz):
    return datetime.now(tz)


def _start_of_week(d, first_day):
    return d - timedelta(days=(d.weekday() - first_day) % 7)


def quota_week(when, week_start='sunday'):
    """Return ``(week, year)`` for a local date or datetime.

    Week 1 is the week containing January 1st and weeks begin on
    ``week_start``. ``year`` is the calendar year, so the tail of December
    can land in week 1.
    """
    d = when.date() if isinstance(when, datetime) else when
    first = weekday_index(week_start)
    start = _start_of_week(d, first)
    if start >= _start_of_week(date(d.year + 1, 1, 1), first):
        return 1, d.year
    week = (start - _start_of_week(date(d.year, 1, 1), first)).days // 7 + 1
    return week, d.year


def next_occurrence(now, weekday, hour):
    """Earliest instant >= ``now`` on ``weekday`` at ``hour:00:00`` in now's tz."""
    candidate = now.replace(hour=hour, minute=0, second=0, microsecond=0)
    candidate += timedelta(days=(weekday - now.weekday()) % 7)
    if candidate < now:
        candidate += timedelta(days=7)
    return candidate


def unix(dt):
    return int(dt.timestamp())
