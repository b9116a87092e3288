import os
from dotenv import load_dotenv

load_dotenv()


def _split_list(value):
    return [item.strip() for item in (value or '').split(',') if item.strip()]


class Config:
    """
    Base configuration for the portfolio backend.
    Values come from the environment (or a .env file) and are copied into
    app.config by Folio(app) unless the host app already set them.
    """
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY')
    ENVIRONMENT = os.getenv('ENVIRONMENT', 'development')

    # Database paths - use environment variables or fallback to DB_DIR
    DB_DIR = os.getenv('DB_DIR', os.path.join(os.getcwd(), 'databases'))
    PORTFOLIO_DB = os.getenv('PORTFOLIO_DB', os.path.join(DB_DIR, 'portfolio.db'))
    ANALYTICS_DB = os.getenv('ANALYTICS_DB', os.path.join(DB_DIR, 'analytics_log.db'))

    # The one identity allowed into the admin panel
    ADMIN_EMAIL = os.getenv('ADMIN_EMAIL')

    # Session cookie lifetime in seconds (24 hours)
    SESSION_MAX_AGE = int(os.getenv('SESSION_MAX_AGE', str(60 * 60 * 24)))

    # Firebase Admin SDK
    FIREBASE_CREDENTIALS = os.getenv('FIREBASE_CREDENTIALS')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')

    # Media storage: 'local' (static folder) or 'cloud' (DigitalOcean Spaces)
    STORAGE_TYPE = os.getenv('STORAGE_TYPE', 'local')
    MEDIA_ROOT = os.getenv('MEDIA_ROOT', 'portfolio')
    MEDIA_LOCAL_DIR = os.getenv('MEDIA_LOCAL_DIR')
    MEDIA_URL_PREFIX = os.getenv('MEDIA_URL_PREFIX', '/static')
    DO_SPACES_REGION = os.getenv('DO_SPACES_REGION')
    DO_SPACES_NAME = os.getenv('DO_SPACES_NAME')
    DO_SPACES_KEY = os.getenv('DO_SPACES_KEY')
    DO_SPACES_SECRET = os.getenv('DO_SPACES_SECRET')

    # Old-asset cleanup runs on a background pool unless MEDIA_CLEANUP_SYNC is set
    MEDIA_CLEANUP_SYNC = os.getenv('MEDIA_CLEANUP_SYNC') == '1'
    MEDIA_CLEANUP_WORKERS = int(os.getenv('MEDIA_CLEANUP_WORKERS', '2'))

    # Origins allowed to read the public API
    CORS_ORIGINS = _split_list(os.getenv('CORS_ORIGINS', 'http://localhost:3000'))

    # Collection names
    SKILLS_COLLECTION = 'skills'
    PROJECTS_COLLECTION = 'projects'
    ARTICLES_COLLECTION = 'articles'
    RESUME_COLLECTION = 'resume'
