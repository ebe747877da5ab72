"""
Cursor-based listing of questions, newest first.

Filters are pushed to Firestore as equality predicates and re-checked in
memory. Without a week/year partition the pager fetches one record more
than the page size so that ``nextPage`` reflects a real following record;
with a partition the whole (capped) week is returned unwindowed.
"""

import logging

from app.models import PUBLIC_LIST_FIELDS

logger = logging.getLogger(__name__)

MATCH_FIELDS = ('lang', 'topic', 'author')


def matches(criteria, doc):
    return all(doc.get(k) == v for k, v in criteria.items())


def project_listing(doc, auth_ctx):
    if auth_ctx.auth:
        return dict(doc)
    return {k: doc[k] for k in PUBLIC_LIST_FIELDS if k in doc}


class ListPager:
    """Fetch a page of questions and compute continuation metadata.

    ``fetch(equals, week, year, cursor, limit)`` returns dicts ordered by
    ``date`` descending, starting after ``cursor`` when one is given.
    """

    def __init__(self, fetch, page_size=10, partition_cap=500):
        self.fetch = fetch
        self.page_size = page_size
        self.partition_cap = partition_cap

    def match_criteria(self, filters, auth_ctx):
        criteria = {k: filters[k] for k in MATCH_FIELDS if filters.get(k)}
        if not auth_ctx.auth:
            criteria['approved'] = True
        return criteria

    def list(self, filters, cursor, auth_ctx):
        week, year = filters.get('week'), filters.get('year')
        narrowed = bool(week and year)
        criteria = self.match_criteria(filters, auth_ctx)

        limit = self.partition_cap if narrowed else self.page_size + 1
        docs = self.fetch(
            criteria,
            week if narrowed else None,
            year if narrowed else None,
            cursor or None,
            limit,
        )
        if narrowed and len(docs) >= self.partition_cap:
            logger.warning('Week %s/%s listing hit the partition cap of %d', week, year, self.partition_cap)

        matched = [project_listing(d, auth_ctx) for d in docs if matches(criteria, d)]
        window = matched if narrowed else matched[:self.page_size]

        body = {'response': window, 'count': len(window), 'nextPage': False}
        if len(matched) > len(window):
            body['nextPage'] = True
            body['nextCursor'] = window[-1].get('date')
        return body
