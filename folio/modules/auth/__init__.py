"""
Auth Module
===========

Admin sign-in for the single portfolio owner:
- POST /api/login exchanges a Firebase ID token for a session cookie
- POST /api/logout clears it
- admin_required guards every admin workflow
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from . import routes
from .guard import admin_required, admin_api_required, verify_admin_session

__all__ = ['auth_bp', 'admin_required', 'admin_api_required', 'verify_admin_session']
