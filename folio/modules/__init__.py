"""
Folio Modules
=============

Flask blueprint modules for the portfolio admin and public API.
"""

__all__ = ['auth', 'skills', 'projects', 'articles', 'resume', 'dashboard', 'portfolio_public']
