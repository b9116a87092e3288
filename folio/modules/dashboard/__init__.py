"""
Dashboard Module
================

Admin panel data: every collection in one call, plus recent log entries
(including failed media cleanups).
"""

from flask import Blueprint

# Blueprint name is 'admin' to match the /admin prefix used by the entity modules
dashboard_bp = Blueprint('admin', __name__, url_prefix='/admin')

from . import routes

__all__ = ['dashboard_bp']
