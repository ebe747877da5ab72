"""
Firestore Data Access Object (DAO) layer.

The read handlers call functions from this module instead of querying
the database directly. Every read returns plain dicts stamped with the
document ID.
"""

from flask import current_app, has_app_context
from google.cloud.firestore_v1 import FieldFilter

from app.firebase_init import get_db


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _doc_to_dict(doc_snapshot, id_field='id'):
    """Convert a Firestore DocumentSnapshot to a dict with an ID field."""
    if not doc_snapshot.exists:
        return None
    d = doc_snapshot.to_dict()
    d[id_field] = doc_snapshot.id
    return d


def _query_to_list(query_ref, id_field='id'):
    """Run a query and return a list of dicts."""
    return [_doc_to_dict(doc, id_field) for doc in query_ref.stream()]


def _collection(config_key, default):
    name = current_app.config.get(config_key, default) if has_app_context() else default
    return get_db().collection(name)


def _questions():
    return _collection('QUESTIONS_COLLECTION', 'questions')


# ========================================================================
# Users  (collection: users)
# ========================================================================

def get_user(uid):
    """Get a user document by UID. Returns dict or None."""
    doc = _collection('USERS_COLLECTION', 'users').document(uid).get()
    return _doc_to_dict(doc)


# ========================================================================
# Questions  (collection: questions)
# ========================================================================

def get_question(doc_id):
    """Get a question by document ID. Returns dict with 'docId' or None."""
    doc = _questions().document(doc_id).get()
    return _doc_to_dict(doc, 'docId')


def get_questions_for_week(week, year):
    """All questions in a quota week, newest first."""
    return _query_to_list(
        _questions()
        .where(filter=FieldFilter('week', '==', week))
        .where(filter=FieldFilter('year', '==', year))
        .order_by('date', direction='DESCENDING'),
        'docId',
    )


def list_questions(equals=None, week=None, year=None, cursor=None, limit=None):
    """List questions newest first with equality filters.

    ``week`` and ``year`` narrow to one quota week when both are given.
    ``cursor`` is the ``date`` of the last record of a previous page.
    """
    q = _questions()
    if week and year:
        q = (
            q.where(filter=FieldFilter('week', '==', week))
            .where(filter=FieldFilter('year', '==', year))
        )
    for field, value in (equals or {}).items():
        q = q.where(filter=FieldFilter(field, '==', value))
    q = q.order_by('date', direction='DESCENDING')
    if cursor is not None:
        q = q.start_after({'date': cursor})
    if limit:
        q = q.limit(limit)
    return _query_to_list(q, 'docId')
