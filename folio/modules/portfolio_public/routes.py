"""
Public portfolio API.

Returns the same records the admin panel edits, with CORS headers so the
portfolio frontend can fetch them from its own origin. Allowed origins are
read from app.config['CORS_ORIGINS'] on each request.
"""

import os

from flask import current_app, jsonify
from flask_cors import cross_origin

from folio.core.config import Config
from folio.core.database import get_store
from folio.modules.articles.routes import fetch_articles
from folio.modules.projects.routes import fetch_projects
from folio.modules.resume.routes import fetch_resume
from folio.modules.skills.routes import fetch_skills, group_by_category
from . import portfolio_public_bp


def _respond(result):
    if result.get('success'):
        return jsonify(result)
    return jsonify(result), 500


@portfolio_public_bp.route('/api/skills', methods=['GET'])
@cross_origin()
def public_skills():
    return _respond(fetch_skills())


@portfolio_public_bp.route('/api/skills/grouped', methods=['GET'])
@cross_origin()
def public_skills_grouped():
    result = fetch_skills()
    if result.get('success'):
        result['data'] = group_by_category(result['data'])
    return _respond(result)


@portfolio_public_bp.route('/api/projects', methods=['GET'])
@cross_origin()
def public_projects():
    return _respond(fetch_projects())


@portfolio_public_bp.route('/api/articles', methods=['GET'])
@cross_origin()
def public_articles():
    return _respond(fetch_articles())


@portfolio_public_bp.route('/api/resume', methods=['GET'])
@cross_origin()
def public_resume():
    return _respond(fetch_resume())


@portfolio_public_bp.route('/health', methods=['GET'])
def health():
    """Liveness plus a document store check"""
    checks = {}
    try:
        get_store().count(Config.SKILLS_COLLECTION)
        checks['database'] = 'ok'
    except Exception as e:
        checks['database'] = f'error: {e}'

    db_dir = current_app.config.get('DB_DIR')
    checks['db_dir'] = 'ok' if db_dir and os.path.isdir(db_dir) else 'missing'

    status = 'ok' if all(v == 'ok' for v in checks.values()) else 'critical'
    return jsonify({'status': status, 'checks': checks}), 200 if status == 'ok' else 503
