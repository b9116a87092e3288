"""
Identity Provider
=================

Thin wrapper around the Firebase Admin SDK. Sign-in happens in the browser;
the backend only verifies ID tokens, mints session cookies and verifies
them on every admin call.
"""

from datetime import timedelta

import firebase_admin
from firebase_admin import auth, credentials
from firebase_admin.exceptions import FirebaseError

from .exceptions import Unauthorized

FIREBASE_APP_NAME = 'folio'


class IdentityProvider:
    """Verifies Firebase ID tokens and session cookies"""

    def __init__(self, credentials_path=None, project_id=None):
        self.credentials_path = credentials_path
        self.project_id = project_id
        self._app = None

    def _get_app(self):
        if self._app is None:
            try:
                self._app = firebase_admin.get_app(FIREBASE_APP_NAME)
            except ValueError:
                if self.credentials_path:
                    cred = credentials.Certificate(self.credentials_path)
                else:
                    cred = credentials.ApplicationDefault()
                options = {'projectId': self.project_id} if self.project_id else None
                self._app = firebase_admin.initialize_app(cred, options, name=FIREBASE_APP_NAME)
        return self._app

    def verify_id_token(self, id_token):
        """Decode a client ID token. Raises Unauthorized if it is not valid."""
        if not id_token:
            raise Unauthorized("Unauthorized: No ID token provided")
        try:
            return auth.verify_id_token(id_token, app=self._get_app())
        except (ValueError, FirebaseError) as e:
            raise Unauthorized(f"Unauthorized: {e}") from e

    def create_session_cookie(self, id_token, expires_in):
        """Exchange an ID token for a session cookie valid for expires_in"""
        if isinstance(expires_in, (int, float)):
            expires_in = timedelta(seconds=expires_in)
        try:
            return auth.create_session_cookie(id_token, expires_in=expires_in, app=self._get_app())
        except (ValueError, FirebaseError) as e:
            raise Unauthorized(f"Unauthorized: {e}") from e

    def verify_session_cookie(self, token, check_revoked=True):
        """Decode a session cookie, optionally checking for revocation"""
        try:
            return auth.verify_session_cookie(token, check_revoked=check_revoked, app=self._get_app())
        except (ValueError, FirebaseError) as e:
            raise Unauthorized(f"Unauthorized: {e}") from e
