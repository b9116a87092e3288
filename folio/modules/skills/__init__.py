"""
Skills Admin Module
===================

Skills shown on the portfolio, grouped by their free-text category.
"""

from flask import Blueprint

skills_bp = Blueprint('skills_admin', __name__, url_prefix='/admin')

from . import routes
from .routes import SKILL, add_or_update_skill, delete_skill, fetch_skills

__all__ = ['skills_bp', 'SKILL', 'add_or_update_skill', 'delete_skill', 'fetch_skills']
