"""
Shared fixtures: a Folio app on temp databases, local media storage in a
temp folder, and a fake identity provider standing in for Firebase.
"""

import io

import pytest
from flask import Flask
from werkzeug.datastructures import FileStorage

from folio import Folio
from folio.core import storage, workflow
from folio.core.database import DocumentStore
from folio.core.exceptions import Unauthorized

ADMIN_EMAIL = "admin@example.com"
ADMIN_SESSION = "admin-session"
OTHER_SESSION = "other-session"


class FakeIdentityProvider:
    """Session cookies and ID tokens known up front"""

    def __init__(self):
        self.sessions = {
            ADMIN_SESSION: {'uid': 'admin-uid', 'email': ADMIN_EMAIL},
            OTHER_SESSION: {'uid': 'other-uid', 'email': 'visitor@example.com'},
        }
        self.id_tokens = {
            'admin-id-token': {'uid': 'admin-uid', 'email': ADMIN_EMAIL},
            'other-id-token': {'uid': 'other-uid', 'email': 'visitor@example.com'},
        }
        self.created_sessions = []

    def verify_id_token(self, id_token):
        if id_token not in self.id_tokens:
            raise Unauthorized("Unauthorized: invalid ID token")
        return dict(self.id_tokens[id_token])

    def create_session_cookie(self, id_token, expires_in):
        self.created_sessions.append((id_token, expires_in))
        return f"session-for-{id_token}"

    def verify_session_cookie(self, token, check_revoked=True):
        if token not in self.sessions:
            raise Unauthorized("Unauthorized: invalid session cookie")
        return dict(self.sessions[token])


@pytest.fixture
def identity():
    return FakeIdentityProvider()


@pytest.fixture
def media_dir(tmp_path):
    d = tmp_path / "media"
    d.mkdir()
    return d


@pytest.fixture
def app(tmp_path, media_dir, identity):
    """Flask app with every Folio module registered"""
    db_dir = tmp_path / "db"
    app = Flask(__name__)
    app.config.update(
        TESTING=True,
        SECRET_KEY="test-secret",
        DB_DIR=str(db_dir),
        PORTFOLIO_DB=str(db_dir / "portfolio.db"),
        ANALYTICS_DB=str(db_dir / "analytics.db"),
        ADMIN_EMAIL=ADMIN_EMAIL,
        STORAGE_TYPE="local",
        MEDIA_LOCAL_DIR=str(media_dir),
        MEDIA_URL_PREFIX="/static",
        MEDIA_CLEANUP_SYNC=True,
    )
    Folio(app, identity=identity)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_ctx(app):
    """Request context carrying the admin session cookie"""
    with app.test_request_context('/', headers={'Cookie': f'token={ADMIN_SESSION}'}):
        yield


@pytest.fixture
def visitor_ctx(app):
    """Request context carrying a valid session for a non-admin identity"""
    with app.test_request_context('/', headers={'Cookie': f'token={OTHER_SESSION}'}):
        yield


@pytest.fixture
def store(app):
    with app.app_context():
        return DocumentStore(app.config['PORTFOLIO_DB'])


@pytest.fixture
def uploads(monkeypatch):
    """Records every media upload made by the workflows"""
    calls = []
    real = workflow.upload_media

    def spy(file_bytes, folder, **kwargs):
        url = real(file_bytes, folder, **kwargs)
        calls.append({'folder': folder, 'url': url, **kwargs})
        return url

    monkeypatch.setattr(workflow, 'upload_media', spy)
    return calls


@pytest.fixture
def destroyed(monkeypatch):
    """Records every public id passed to the media host for removal"""
    calls = []
    real = storage.destroy_media

    def spy(public_id):
        calls.append(public_id)
        return real(public_id)

    monkeypatch.setattr(storage, 'destroy_media', spy)
    return calls


@pytest.fixture
def store_writes(monkeypatch):
    """Counts create/update/delete calls on the document store"""
    calls = []
    for name in ('create', 'update', 'delete'):
        real = getattr(DocumentStore, name)

        def spy(self, *args, _real=real, _name=name):
            calls.append((_name, args))
            return _real(self, *args)

        monkeypatch.setattr(DocumentStore, name, spy)
    return calls


def make_file(filename="go.png", data=b"\x89PNG fake image bytes"):
    return FileStorage(stream=io.BytesIO(data), filename=filename, content_type="application/octet-stream")
