"""
Portfolio Public Module
=======================

Read-only JSON for the public portfolio page:
- /api/skills, /api/skills/grouped
- /api/projects
- /api/articles
- /api/resume
- /health
"""

from flask import Blueprint

portfolio_public_bp = Blueprint('portfolio_public', __name__)

from . import routes

__all__ = ['portfolio_public_bp']
