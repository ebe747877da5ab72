import logging
from functools import wraps

from flask import request, g
from firebase_admin import auth as firebase_auth
from firebase_admin.exceptions import FirebaseError

from app.errors import Unauthorized
from app.firebase_init import verify_id_token
from app import firestore_dao as dao

logger = logging.getLogger(__name__)

_TOKEN_ERRORS = (
    firebase_auth.InvalidIdTokenError,
    firebase_auth.CertificateFetchError,
    firebase_auth.UserDisabledError,
    firebase_auth.UserNotFoundError,
    FirebaseError,
    ValueError,
)


def _bearer_token():
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        return None
    return token.strip()


def _verify_token(id_token):
    """Verify a Firebase ID token and return the caller's user document."""
    try:
        decoded = verify_id_token(id_token)
    except _TOKEN_ERRORS as e:
        logger.debug('Rejected ID token: %s', e)
        return None

    user_data = dao.get_user(decoded['uid'])
    if not user_data:
        return None
    user_data['uid'] = decoded['uid']
    return user_data


class AuthContext:
    """Per-request caller identity: ``user.code``, ``user.admin`` and ``auth``.

    ``auth`` is True for verified dashboard callers; public callers (the
    chat-bot integration, anonymous requests) get an empty user.
    """

    def __init__(self, user=None, auth=False):
        self.user = user or {}
        self.auth = bool(auth)

    @property
    def code(self):
        return self.user.get('code')

    @property
    def is_admin(self):
        return bool(self.user.get('admin'))

    @classmethod
    def public(cls):
        return cls()

    def __repr__(self):
        return f'<AuthContext code={self.code!r} admin={self.is_admin} auth={self.auth}>'


def load_auth_context():
    """Load the caller's AuthContext into g before each request."""
    if hasattr(g, '_auth_context'):
        return
    token = _bearer_token()
    user_data = _verify_token(token) if token else None
    g._auth_context = AuthContext(user_data, auth=user_data is not None)


def get_auth_context():
    if not hasattr(g, '_auth_context'):
        load_auth_context()
    return g._auth_context


def auth_required(f):
    @wraps(f)
    def decorated(*args, **kwargs):
        if not get_auth_context().auth:
            raise Unauthorized()
        return f(*args, **kwargs)
    return decorated
