"""
Projects Admin Module
=====================

Admin interface for project portfolio management.

Provides:
- Project creation and editing
- Image upload for projects
- Skills tagging (list of skill ids)
"""

from flask import Blueprint

projects_bp = Blueprint('projects_admin', __name__, url_prefix='/admin')

from . import routes
from .routes import PROJECT, add_or_update_project, delete_project, fetch_projects

__all__ = ['projects_bp', 'PROJECT', 'add_or_update_project', 'delete_project', 'fetch_projects']
