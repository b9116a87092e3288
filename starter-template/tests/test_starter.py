"""
Critical tests for the portfolio starter app.
Run with: pytest starter-template/tests -v
"""

import os
import sys
import pytest

# Add parent directory to path so we can import app
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Create application for testing."""
    monkeypatch.setenv('DB_DIR', str(tmp_path))
    from app import app
    app.config['TESTING'] = True
    app.config['PORTFOLIO_DB'] = str(tmp_path / 'portfolio.db')
    app.config['ANALYTICS_DB'] = str(tmp_path / 'analytics_log.db')
    app.config['DB_DIR'] = str(tmp_path)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def test_app_starts(app):
    assert 'folio' in app.extensions


def test_health_endpoint(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json()['status'] == 'ok'


def test_index_lists_public_api(client):
    response = client.get('/')
    assert response.status_code == 200
    assert response.get_json()['skills'] == '/api/skills'
