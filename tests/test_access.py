"""Tests for per-caller projection of a single question."""

import pytest

from app.decorators import AuthContext
from app.errors import NotFound
from app.models import RESTRICTED_FIELDS
from app.services.access import can_edit, project_question


def make_question(**overrides):
    question = {
        'docId': 'Q1',
        'question': 'What is 2 + 2?',
        'topic': 'algebra',
        'author': 'C001',
        'date': 1760851800,
        'week': 42,
        'year': 2026,
        'approved': True,
        'correct_option': 1,
        'explanation': 'Arithmetic',
        'screenshot': 'gs://bucket/q1.png',
        'admin_message_id': 77,
    }
    question.update(overrides)
    return question


class TestProjectQuestion:

    def test_missing_question_is_not_found(self, author_ctx):
        with pytest.raises(NotFound):
            project_question(None, author_ctx)

    def test_unapproved_question_hidden_from_public(self, public_ctx):
        with pytest.raises(NotFound):
            project_question(make_question(approved=False), public_ctx)

    def test_unapproved_question_visible_to_elevated_caller(self, author_ctx):
        data = project_question(make_question(approved=False), author_ctx)
        assert data['approved'] is False
        assert data['docId'] == 'Q1'

    def test_elevated_caller_sees_full_record(self, admin_ctx):
        data = project_question(make_question(poll_id='P1'), admin_ctx)
        assert data['correct_option'] == 1
        assert data['poll_id'] == 'P1'

    def test_public_caller_never_sees_restricted_fields(self, public_ctx):
        data = project_question(make_question(poll_id='P1', schedule=1), public_ctx)
        for field in RESTRICTED_FIELDS:
            assert field not in data
        assert data['question'] == 'What is 2 + 2?'
        assert data['docId'] == 'Q1'

    def test_source_record_is_not_mutated(self, public_ctx):
        question = make_question()
        project_question(question, public_ctx)
        assert 'canEdit' not in question
        assert question['correct_option'] == 1


class TestCanEdit:

    def test_author_may_edit_unapproved(self, author_ctx):
        assert can_edit(make_question(approved=False), author_ctx) is True

    def test_author_may_not_edit_approved(self, author_ctx):
        assert can_edit(make_question(), author_ctx) is False

    def test_other_contributor_may_not_edit(self):
        ctx = AuthContext({'code': 'C002'}, auth=True)
        assert can_edit(make_question(approved=False), ctx) is False

    def test_admin_may_edit_approved(self, admin_ctx):
        assert can_edit(make_question(), admin_ctx) is True

    @pytest.mark.parametrize('ctx_name', ['public_ctx', 'author_ctx', 'admin_ctx'])
    def test_published_question_is_never_editable(self, ctx_name, request):
        ctx = request.getfixturevalue(ctx_name)
        assert can_edit(make_question(approved=False, poll_id='P1'), ctx) is False

    def test_public_caller_without_code_cannot_edit_authorless(self, public_ctx):
        assert can_edit(make_question(author=None, approved=False), public_ctx) is False

    def test_can_edit_uses_full_record_for_public_callers(self):
        # Public projection drops poll_id and approved; editability must not
        ctx = AuthContext({'code': 'C001'}, auth=False)
        data = project_question(make_question(poll_id='P1'), ctx)
        assert data['canEdit'] is False
