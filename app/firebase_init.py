"""Lazily initialised Firebase app: Firestore client and ID-token checks."""

import os
import firebase_admin
from firebase_admin import auth, credentials, firestore

_app = None
_db = None


def _credentials():
    cred_path = os.environ.get('GOOGLE_APPLICATION_CREDENTIALS', './firebase-service-account.json')
    if os.path.exists(cred_path):
        return credentials.Certificate(cred_path)
    return credentials.ApplicationDefault()


def init_firebase(app_config=None):
    global _app, _db

    if _app is not None:
        return

    project_id = (app_config or {}).get('FIREBASE_PROJECT_ID') or os.environ.get('FIREBASE_PROJECT_ID')
    options = {'projectId': project_id} if project_id else None

    _app = firebase_admin.initialize_app(_credentials(), options=options)
    _db = firestore.client(app=_app)


def get_db():
    if _db is None:
        init_firebase()
    return _db


def verify_id_token(id_token):
    """Decoded claims of a dashboard caller's ID token, revocation included."""
    if _app is None:
        init_firebase()
    return auth.verify_id_token(id_token, app=_app, check_revoked=True)
