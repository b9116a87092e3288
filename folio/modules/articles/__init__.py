"""
Articles Admin Module
=====================

Articles with a markdown description and a cover image.
"""

from flask import Blueprint

articles_bp = Blueprint('articles_admin', __name__, url_prefix='/admin')

from . import routes
from .routes import ARTICLE, add_or_update_article, delete_article, fetch_articles

__all__ = ['articles_bp', 'ARTICLE', 'add_or_update_article', 'delete_article', 'fetch_articles']
