"""
Shared fixtures: an app built without Firebase, an in-memory question
store standing in for Firestore, and bearer tokens mapped to users.
"""

from datetime import datetime, timezone, timedelta

import pytest

from app import create_app
from app import decorators
from app import firestore_dao as dao
from app.decorators import AuthContext
from config import Config

IST = timezone(timedelta(hours=5, minutes=30))


class QuizTestConfig(Config):
    TESTING = True
    FIREBASE_ENABLED = False
    QUIZ_UTC_OFFSET = '+05:30'
    QUIZ_WEEK_START = 'sunday'
    LIST_PAGE_SIZE = 10
    LIST_PARTITION_CAP = 500


USERS = {
    'token-c001': {'uid': 'u1', 'code': 'C001', 'admin': False},
    'token-c002': {'uid': 'u2', 'code': 'C002', 'admin': False},
    'token-admin': {'uid': 'u9', 'code': 'A001', 'admin': True},
}


class FakeQuestionStore:
    """In-memory stand-in for the questions collection."""

    def __init__(self):
        self.docs = {}
        self.calls = []

    def add(self, doc_id, **data):
        data.setdefault('approved', False)
        self.docs[doc_id] = data
        return doc_id

    def _all(self):
        rows = [dict(data, docId=doc_id) for doc_id, data in self.docs.items()]
        return sorted(rows, key=lambda d: d.get('date', 0), reverse=True)

    def get_question(self, doc_id):
        data = self.docs.get(doc_id)
        return dict(data, docId=doc_id) if data is not None else None

    def get_questions_for_week(self, week, year):
        self.calls.append(('week', week, year))
        return [d for d in self._all() if d.get('week') == week and d.get('year') == year]

    def list_questions(self, equals=None, week=None, year=None, cursor=None, limit=None):
        self.calls.append(('list', dict(equals or {}), week, year, cursor, limit))
        rows = self._all()
        if week and year:
            rows = [d for d in rows if d.get('week') == week and d.get('year') == year]
        rows = [d for d in rows if all(d.get(k) == v for k, v in (equals or {}).items())]
        if cursor is not None:
            rows = [d for d in rows if d.get('date', 0) < cursor]
        return rows[:limit] if limit else rows


@pytest.fixture
def store(monkeypatch):
    fake = FakeQuestionStore()
    monkeypatch.setattr(dao, 'get_question', fake.get_question)
    monkeypatch.setattr(dao, 'get_questions_for_week', fake.get_questions_for_week)
    monkeypatch.setattr(dao, 'list_questions', fake.list_questions)
    return fake


@pytest.fixture
def app(store, monkeypatch):
    monkeypatch.setattr(decorators, '_verify_token', lambda token: dict(USERS[token]) if token in USERS else None)
    app = create_app(QuizTestConfig)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def public_ctx():
    return AuthContext.public()


@pytest.fixture
def author_ctx():
    return AuthContext({'code': 'C001', 'admin': False}, auth=True)


@pytest.fixture
def admin_ctx():
    return AuthContext({'code': 'A001', 'admin': True}, auth=True)


@pytest.fixture
def fixed_now():
    # Saturday afternoon, quota week 42 of 2026 (Sunday-start weeks)
    return datetime(2026, 10, 17, 12, 30, 45, tzinfo=IST)
