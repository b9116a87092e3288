"""
Document Store
==============

Schemaless collections (skills, projects, articles, resume) kept as JSON
documents in SQLite. Ids are assigned by the store; timestamps are set by
the caller.
"""

import json
import os
import sqlite3
import time
import uuid

from .config import Config
from .exceptions import NotFound, UpstreamError


class Database:

    @staticmethod
    def connect(path):
        return sqlite3.connect(path)


def now_ms():
    """Current time as epoch milliseconds"""
    return int(time.time() * 1000)


def get_db_config():
    """Get database path: Flask app config first, then Config"""
    try:
        from flask import current_app
        val = current_app.config.get('PORTFOLIO_DB')
        if val:
            return val
    except RuntimeError:
        pass
    return Config.PORTFOLIO_DB


def get_store():
    """Document store for the current app"""
    return DocumentStore(get_db_config())


class DocumentStore:
    """create/update/delete/get/list over named collections"""

    def __init__(self, path):
        self.path = path
        self.init_db()

    def init_db(self):
        try:
            db_dir = os.path.dirname(self.path)
            if db_dir:
                os.makedirs(db_dir, exist_ok=True)

            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute('''
                    CREATE TABLE IF NOT EXISTS documents (
                        seq INTEGER PRIMARY KEY AUTOINCREMENT,
                        collection TEXT NOT NULL,
                        id TEXT NOT NULL,
                        data TEXT NOT NULL,
                        UNIQUE(collection, id)
                    )
                ''')
                cursor.execute(
                    'CREATE INDEX IF NOT EXISTS idx_documents_collection ON documents(collection)'
                )
                conn.commit()
        except (OSError, sqlite3.Error) as e:
            raise UpstreamError(f"Document store unavailable: {e}") from e

    @staticmethod
    def _to_record(doc_id, data):
        record = json.loads(data)
        record.pop('id', None)
        return {'id': doc_id, **record}

    def create(self, collection, fields):
        """Insert a new document and return its id"""
        doc_id = uuid.uuid4().hex
        data = {k: v for k, v in fields.items() if k != 'id'}
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'INSERT INTO documents (collection, id, data) VALUES (?, ?, ?)',
                    (collection, doc_id, json.dumps(data))
                )
                conn.commit()
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to create {collection} document: {e}") from e
        return doc_id

    def update(self, collection, doc_id, fields):
        """Merge fields into an existing document.

        Raises NotFound when no document has this id.
        """
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'SELECT data FROM documents WHERE collection = ? AND id = ?',
                    (collection, doc_id)
                )
                row = cursor.fetchone()
                if not row:
                    raise NotFound(f"No document to update: {collection}/{doc_id}")

                data = json.loads(row[0])
                data.update({k: v for k, v in fields.items() if k != 'id'})
                cursor.execute(
                    'UPDATE documents SET data = ? WHERE collection = ? AND id = ?',
                    (json.dumps(data), collection, doc_id)
                )
                conn.commit()
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to update {collection}/{doc_id}: {e}") from e

    def delete(self, collection, doc_id):
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'DELETE FROM documents WHERE collection = ? AND id = ?',
                    (collection, doc_id)
                )
                conn.commit()
                return cursor.rowcount > 0
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to delete {collection}/{doc_id}: {e}") from e

    def get(self, collection, doc_id):
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'SELECT id, data FROM documents WHERE collection = ? AND id = ?',
                    (collection, doc_id)
                )
                row = cursor.fetchone()
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to read {collection}/{doc_id}: {e}") from e
        return self._to_record(*row) if row else None

    def list(self, collection):
        """All documents in a collection, oldest first"""
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'SELECT id, data FROM documents WHERE collection = ? ORDER BY seq',
                    (collection,)
                )
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to list {collection}: {e}") from e
        return [self._to_record(*row) for row in rows]

    def first(self, collection):
        records = self.list(collection)
        return records[0] if records else None

    def count(self, collection):
        try:
            with Database.connect(self.path) as conn:
                cursor = conn.cursor()
                cursor.execute(
                    'SELECT COUNT(*) FROM documents WHERE collection = ?',
                    (collection,)
                )
                return cursor.fetchone()[0]
        except sqlite3.Error as e:
            raise UpstreamError(f"Failed to count {collection}: {e}") from e
