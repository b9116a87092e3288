"""
Media Storage
=============

Uploads assets under a namespaced folder (portfolio/skills, portfolio/projects,
portfolio/articles, portfolio/resume) to DigitalOcean Spaces or the local
static folder, and removes superseded assets in the background.

An asset's public id is its object key without the extension, e.g.
"portfolio/skills/3f2a...". Removal failures never reach the caller; they
are written to app_logs under source 'media_cleanup'.
"""

import os
import re
import threading
import uuid
from concurrent.futures import ThreadPoolExecutor, wait

from flask import current_app

from .exceptions import UpstreamError
from .logging_service import LoggingService

CONTENT_TYPES = {
    'jpg': 'image/jpeg', 'jpeg': 'image/jpeg',
    'png': 'image/png', 'gif': 'image/gif', 'webp': 'image/webp',
    'svg': 'image/svg+xml', 'pdf': 'application/pdf',
}

_executor = None
_executor_lock = threading.Lock()
_pending = set()


# ===== Settings =====

def _setting(key, default=None):
    val = current_app.config.get(key)
    return val if val is not None else default


def is_cloud_storage():
    return _setting('STORAGE_TYPE', 'local') == 'cloud'


def get_media_root():
    return _setting('MEDIA_ROOT', 'portfolio')


def get_do_spaces_config():
    """Get DigitalOcean Spaces configuration"""
    return {
        'region': _setting('DO_SPACES_REGION'),
        'space_name': _setting('DO_SPACES_NAME'),
        'access_key': _setting('DO_SPACES_KEY'),
        'secret_key': _setting('DO_SPACES_SECRET'),
    }


def _local_dir():
    return _setting('MEDIA_LOCAL_DIR') or current_app.static_folder


def _spaces_client(config):
    import boto3
    return boto3.client(
        's3',
        region_name=config['region'],
        endpoint_url=f"https://{config['region']}.digitaloceanspaces.com",
        aws_access_key_id=config['access_key'],
        aws_secret_access_key=config['secret_key'],
    )


# ===== Upload =====

def upload_media(file_bytes, folder, filename=None, resource_type='image', file_format=None):
    """Upload an asset into <MEDIA_ROOT>/<folder>.

    Args:
        file_bytes: Raw bytes of the file.
        folder: Entity folder ("skills", "projects", "articles", "resume").
        filename: Original filename, used for the extension.
        resource_type: "image" or "raw"; only affects the fallback content type.
        file_format: Forces the stored extension (resume uploads use "pdf").

    Returns:
        Public URL (cloud) or a path under MEDIA_URL_PREFIX (local).
    """
    ext = file_format
    if not ext and filename and '.' in filename:
        ext = filename.rsplit('.', 1)[-1].lower()

    public_id = f"{get_media_root()}/{folder}/{uuid.uuid4().hex}"
    object_key = f"{public_id}.{ext}" if ext else public_id

    try:
        if is_cloud_storage():
            url = _upload_to_spaces(file_bytes, object_key, resource_type)
        else:
            url = _save_locally(file_bytes, object_key)
    except Exception as e:
        raise UpstreamError(f"Media upload failed: {e}") from e

    LoggingService.info('media', f"Uploaded {resource_type} to {folder}", {
        'public_id': public_id,
        'url': url,
    })
    return url


def _upload_to_spaces(file_bytes, object_key, resource_type):
    """Upload to DigitalOcean Spaces via boto3."""
    config = get_do_spaces_config()

    ext = os.path.splitext(object_key)[1].lstrip('.').lower()
    fallback = 'application/octet-stream' if resource_type == 'raw' else 'image/jpeg'
    content_type = CONTENT_TYPES.get(ext, fallback)

    client = _spaces_client(config)
    client.put_object(
        Bucket=config['space_name'],
        Key=object_key,
        Body=file_bytes,
        ACL='public-read',
        ContentType=content_type,
    )

    return f"https://{config['space_name']}.{config['region']}.digitaloceanspaces.com/{object_key}"


def _save_locally(file_bytes, object_key):
    """Save under the local media directory."""
    filepath = os.path.join(_local_dir(), *object_key.split('/'))
    os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, 'wb') as f:
        f.write(file_bytes)
    prefix = _setting('MEDIA_URL_PREFIX', '/static').rstrip('/')
    return f"{prefix}/{object_key}"


# ===== Public ids =====

def public_id_from_url(url, match_folder, target_folder=None):
    """Recover the public id of a stored asset from its URL.

    Looks for a ".../<MEDIA_ROOT>/<match_folder>/<id>" fragment and returns
    "<MEDIA_ROOT>/<target_folder or match_folder>/<id>", or None when the
    URL does not match.
    """
    if not url:
        return None
    root = get_media_root()
    match = re.search(rf"/{re.escape(root)}/{re.escape(match_folder)}/([^/.]+)", url)
    if not match:
        return None
    return f"{root}/{target_folder or match_folder}/{match.group(1)}"


# ===== Removal =====

def destroy_media(public_id):
    """Delete every stored object for a public id. Returns the number removed."""
    if is_cloud_storage():
        return _destroy_cloud(public_id)
    return _destroy_local(public_id)


def _destroy_cloud(public_id):
    config = get_do_spaces_config()
    client = _spaces_client(config)

    removed = 0
    paginator = client.get_paginator('list_objects_v2')
    for page in paginator.paginate(Bucket=config['space_name'], Prefix=public_id):
        for obj in page.get('Contents', []):
            key = obj['Key']
            if key == public_id or key.startswith(f"{public_id}."):
                client.delete_object(Bucket=config['space_name'], Key=key)
                removed += 1
    return removed


def _destroy_local(public_id):
    folder, _, name = public_id.rpartition('/')
    directory = os.path.join(_local_dir(), *folder.split('/'))
    if not os.path.isdir(directory):
        return 0

    removed = 0
    for filename in os.listdir(directory):
        if filename == name or filename.startswith(f"{name}."):
            os.unlink(os.path.join(directory, filename))
            removed += 1
    return removed


def _get_executor(app):
    global _executor
    with _executor_lock:
        if _executor is None:
            workers = app.config.get('MEDIA_CLEANUP_WORKERS') or 2
            _executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='media-cleanup')
        return _executor


def _run_cleanup(app, public_id):
    with app.app_context():
        try:
            removed = destroy_media(public_id)
            LoggingService.info('media_cleanup', f"Removed old asset {public_id}", {
                'public_id': public_id,
                'objects_removed': removed,
            })
        except Exception as e:
            LoggingService.error('media_cleanup', f"Failed to remove old asset {public_id}: {e}", {
                'public_id': public_id,
                'error_type': type(e).__name__,
            })


def _discard(future):
    with _executor_lock:
        _pending.discard(future)


def remove_media(public_id):
    """Best-effort removal of a stored asset.

    Returns immediately; the delete runs on the cleanup pool (or inline when
    MEDIA_CLEANUP_SYNC is set) and its outcome only shows up in the logs.
    """
    if not public_id:
        return None

    app = current_app._get_current_object()
    if app.config.get('MEDIA_CLEANUP_SYNC'):
        _run_cleanup(app, public_id)
        return None

    future = _get_executor(app).submit(_run_cleanup, app, public_id)
    with _executor_lock:
        _pending.add(future)
    future.add_done_callback(_discard)
    return future


def wait_for_cleanup(timeout=None):
    """Block until queued removals have finished"""
    with _executor_lock:
        pending = list(_pending)
    if pending:
        wait(pending, timeout=timeout)
