"""Field-level visibility and editability of a single question."""

from app.errors import NotFound
from app.models import RESTRICTED_FIELDS


def can_edit(question, auth_ctx):
    # Published questions are read-only for everyone, admins included
    if question.get('poll_id'):
        return False
    if auth_ctx.is_admin:
        return True
    code = auth_ctx.code
    return bool(code) and question.get('author') == code and not question.get('approved')


def project_question(question, auth_ctx):
    """Visible subset of ``question`` plus ``canEdit`` and ``docId``.

    Unapproved questions do not exist for public callers.
    """
    if question is None or not (question.get('approved') or auth_ctx.auth):
        raise NotFound()

    doc_id = question.get('docId')
    if auth_ctx.auth:
        data = dict(question)
    else:
        data = {k: v for k, v in question.items() if k not in RESTRICTED_FIELDS}

    data['canEdit'] = can_edit(question, auth_ctx)
    data['docId'] = doc_id
    return data
