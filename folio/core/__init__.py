"""
Folio Core
==========

Shared services for the portfolio modules: configuration, the document
store, logging, media storage, identity and the upsert/delete workflows.
"""

from .config import Config
from .database import Database, DocumentStore, get_store
from .logging_service import LoggingService

__all__ = ['Config', 'Database', 'DocumentStore', 'get_store', 'LoggingService']
