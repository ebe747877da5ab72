"""
Next publishing slot resolution.

A contributor may publish one approved question per topic per quota week.
The weekly timetable decides when: the resolver turns the contributor's
matching (day, slot) entry into the next concrete instant.
"""

import logging

from app.errors import AlreadyPosted, NoSchedule, Unauthorized
from app.services import clock

logger = logging.getLogger(__name__)


def find_posted(submissions, topic, author):
    """First approved submission by ``author`` for ``topic``, or None."""
    if not author:
        return None
    for doc in submissions:
        if doc.get('approved') is True and doc.get('topic') == topic and doc.get('author') == author:
            return doc
    return None


class ScheduleResolver:
    """Resolve a contributor's next allowed publish time for a topic.

    ``fetch_week(week, year)`` returns that quota week's questions ordered
    by ``date`` descending.
    """

    def __init__(self, timetable, tz, fetch_week, week_start='sunday'):
        self.timetable = timetable
        self.tz = tz
        self.fetch_week = fetch_week
        self.week_start = week_start

    def match_slot(self, topic, code):
        """Last timetable entry assigning ``topic`` to ``code``.

        Every entry is scanned, so when several slots match the one latest
        in (day, slot) order wins.
        """
        match = None
        for entry in self.timetable.entries():
            if entry.assignee == code and entry.topic == topic:
                match = entry
        return match

    def resolve(self, topic, auth_ctx, now=None):
        if not auth_ctx.auth:
            raise Unauthorized()

        now = now or clock.now_in(self.tz)
        now = now.astimezone(self.tz)
        code = auth_ctx.code
        is_admin = auth_ctx.is_admin

        week, year = clock.quota_week(now, self.week_start)
        submissions = self.fetch_week(week, year)
        if find_posted(submissions, topic, code) and not is_admin:
            raise AlreadyPosted()

        entry = self.match_slot(topic, code) if code else None
        if entry is not None:
            start_hr = self.timetable.start_hour(entry.slot)
            schedule = clock.unix(clock.next_occurrence(now, entry.weekday, start_hr))
            logger.debug('Resolved %s/%s to %s %s (%d)', code, topic, entry.day, entry.slot, schedule)
        elif is_admin:
            schedule = clock.unix(now.replace(second=0, microsecond=0))
        else:
            raise NoSchedule()

        return {'schedule': schedule}
