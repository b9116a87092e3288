"""
Admin Dashboard Routes
======================

What the admin panel renders: skills grouped by category, projects,
articles and the resume list.
"""

from flask import jsonify, request

from folio.core.config import Config
from folio.core.database import get_store
from folio.core.logging_service import LoggingService
from folio.modules.auth.guard import admin_api_required
from folio.modules.skills.routes import group_by_category
from . import dashboard_bp


def get_overview():
    store = get_store()
    skills = store.list(Config.SKILLS_COLLECTION)
    return {
        'skills': skills,
        'skillsByCategory': group_by_category(skills),
        'projects': store.list(Config.PROJECTS_COLLECTION),
        'articles': store.list(Config.ARTICLES_COLLECTION),
        'resumes': store.list(Config.RESUME_COLLECTION),
    }


@dashboard_bp.route('/api/overview', methods=['GET'])
@admin_api_required
def overview():
    try:
        return jsonify({'success': True, 'data': get_overview()})
    except Exception as e:
        LoggingService.log_error_with_traceback('dashboard', e)
        return jsonify({'success': False, 'message': str(e)}), 500


@dashboard_bp.route('/api/logs', methods=['GET'])
@admin_api_required
def logs():
    """Recent log entries. ?source=media_cleanup&level=ERROR lists failed removals."""
    try:
        limit = int(request.args.get('limit', 100))
    except (TypeError, ValueError):
        return jsonify({'success': False, 'message': 'limit must be a number'}), 400

    entries = LoggingService.get_logs(
        source=request.args.get('source'),
        level=request.args.get('level'),
        limit=min(max(limit, 1), 500),
    )
    return jsonify({'success': True, 'data': entries})
