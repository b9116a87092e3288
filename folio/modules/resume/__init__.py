"""
Resume Module
=============

A single resume file. Uploading a new one replaces the stored document and
removes the previous file.
"""

from flask import Blueprint

resume_bp = Blueprint('resume_admin', __name__, url_prefix='/admin')

from . import routes
from .routes import RESUME, add_or_update_resume, fetch_resume

__all__ = ['resume_bp', 'RESUME', 'add_or_update_resume', 'fetch_resume']
