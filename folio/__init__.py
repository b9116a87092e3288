"""
Folio - Portfolio Admin Backend
===============================

Flask backend for a single-admin portfolio site:
- Skills, projects, articles and resume editing behind one admin identity
- Media uploads to DigitalOcean Spaces or the local static folder
- Public JSON API for the portfolio page

Usage:
    from flask import Flask
    from folio import Folio

    app = Flask(__name__)
    Folio(app)
"""

import os

from .core.config import Config
from .core.identity import IdentityProvider

__version__ = '0.1.0'

DEFAULT_FEATURES = {
    'auth': True,
    'skills': True,
    'projects': True,
    'articles': True,
    'resume': True,
    'dashboard': True,
    'portfolio_public': True,
}


class Folio:
    """Flask extension that wires config, storage and every module blueprint"""

    def __init__(self, app=None, config=None, identity=None):
        self._config = config or {}
        self.identity = identity
        self._registered = []
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self._apply_config_defaults(app)
        self._setup_database_dir(app)

        if self.identity is None:
            self.identity = IdentityProvider(
                app.config.get('FIREBASE_CREDENTIALS'),
                app.config.get('FIREBASE_PROJECT_ID'),
            )

        self._register_modules(app)
        app.extensions['folio'] = self

    def _apply_config_defaults(self, app):
        """Copy Config values the host app has not set itself"""
        for key in dir(Config):
            if key.isupper() and app.config.get(key) is None:
                app.config[key] = getattr(Config, key)

        # DB paths follow a DB_DIR set by the host app
        db_dir = app.config['DB_DIR']
        if db_dir != Config.DB_DIR:
            for key, filename in (('PORTFOLIO_DB', 'portfolio.db'), ('ANALYTICS_DB', 'analytics_log.db')):
                if app.config[key] == getattr(Config, key):
                    app.config[key] = os.path.join(db_dir, filename)

    def _setup_database_dir(self, app):
        db_dir = app.config.get('DB_DIR')
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)

    def _features(self):
        features = dict(DEFAULT_FEATURES)
        features.update(self._config.get('features', {}))
        return features

    def _register_modules(self, app):
        from .modules.auth import auth_bp
        from .modules.skills import skills_bp
        from .modules.projects import projects_bp
        from .modules.articles import articles_bp
        from .modules.resume import resume_bp
        from .modules.dashboard import dashboard_bp
        from .modules.portfolio_public import portfolio_public_bp

        blueprints = {
            'auth': auth_bp,
            'skills': skills_bp,
            'projects': projects_bp,
            'articles': articles_bp,
            'resume': resume_bp,
            'dashboard': dashboard_bp,
            'portfolio_public': portfolio_public_bp,
        }

        for name, enabled in self._features().items():
            if enabled and name in blueprints:
                app.register_blueprint(blueprints[name])
                self._registered.append(name)
                print(f"[folio] Registered module: {name}")

    def get_registered_modules(self):
        return list(self._registered)


__all__ = ['Folio', 'Config', 'IdentityProvider']
