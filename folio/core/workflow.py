"""
Upsert / Delete Workflows
=========================

One implementation of the admin form workflow shared by every entity type:

    validate fields -> upload new asset -> persist -> remove old asset

Authentication is not done here; module entry points are wrapped with
admin_required, which runs before any of these steps.
"""

import json
from functools import wraps

from flask import g

from .database import get_store, now_ms
from .exceptions import WorkflowError, ValidationError
from .logging_service import LoggingService
from .storage import upload_media, remove_media, public_id_from_url


def text_field(value):
    return '' if value is None else str(value)


def json_list_field(value):
    """Parse a JSON array submitted as a form string ("[]" when blank)"""
    if isinstance(value, (list, tuple)):
        return list(value)
    try:
        parsed = json.loads(value or '[]')
    except (TypeError, ValueError):
        raise ValidationError("Skills must be a JSON list")
    if not isinstance(parsed, list):
        raise ValidationError("Skills must be a JSON list")
    return parsed


class EntityType:
    """How one collection is edited from the admin forms.

    delete_match_folder is the folder searched for in the stored media URL
    when a record is deleted. For projects and articles it is "skills".
    """

    def __init__(self, name, collection, folder, fields, required=(),
                 required_message=None, media_field='image', file_field='image',
                 file_format=None, resource_type='image',
                 delete_match_folder=None, label=None):
        self.name = name
        self.collection = collection
        self.folder = folder
        self.fields = fields
        self.required = tuple(required)
        self.required_message = required_message or f"{name.title()} is missing required fields"
        self.media_field = media_field
        self.file_field = file_field
        self.file_format = file_format
        self.resource_type = resource_type
        self.delete_match_folder = delete_match_folder or folder
        self.label = label or collection.title()

    def parse(self, form):
        return {name: parser(form.get(name)) for name, parser in self.fields.items()}

    def validate(self, fields):
        if any(not fields.get(name) for name in self.required):
            raise ValidationError(self.required_message)


def uploaded_file(files, key):
    """The uploaded file under key, or None when nothing was chosen"""
    if not files:
        return None
    file = files.get(key)
    if file is None or not getattr(file, 'filename', ''):
        return None
    return file


def workflow_result(source):
    """Turn whatever a workflow raises into a {'success': False} result"""
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except WorkflowError as e:
                LoggingService.warning(source, f"{f.__name__} failed: {e}")
                g.workflow_status = e.http_status
                return {'success': False, 'message': str(e)}
            except Exception as e:
                LoggingService.log_error_with_traceback(source, e, {'workflow': f.__name__})
                g.workflow_status = 500
                return {'success': False, 'message': str(e)}
        return decorated_function
    return decorator


def upsert(entity_type, form, files=None, entity_id=None):
    """Create (no entity_id) or update a record from submitted form data."""
    fields = entity_type.parse(form)
    entity_type.validate(fields)

    existing_url = text_field(form.get('existingImage')).strip()
    media_url = existing_url
    old_public_id = None

    new_file = uploaded_file(files, entity_type.file_field)
    if new_file is not None:
        if existing_url:
            old_public_id = public_id_from_url(existing_url, entity_type.folder)
        media_url = upload_media(
            new_file.read(), entity_type.folder,
            filename=new_file.filename,
            resource_type=entity_type.resource_type,
            file_format=entity_type.file_format,
        )

    # An empty media value is left out so it never overwrites a stored one
    if media_url:
        fields[entity_type.media_field] = media_url
    fields['updatedAt'] = now_ms()

    store = get_store()
    if entity_id:
        store.update(entity_type.collection, entity_id, fields)
        action = 'updated'
    else:
        fields['createdAt'] = fields['updatedAt']
        entity_id = store.create(entity_type.collection, fields)
        action = 'created'

    LoggingService.log_user_action(entity_type.collection, f"{entity_type.name} {action}", details={
        'id': entity_id,
        'uploaded': new_file is not None,
    })

    remove_media(old_public_id)
    return {'success': True, 'id': entity_id}


def upsert_singleton(entity_type, files):
    """Replace the single document of a collection with a newly uploaded file.

    The first existing document is updated in place; otherwise one is
    created. The previous asset is removed after the new one is stored.
    """
    new_file = uploaded_file(files, entity_type.file_field)
    if new_file is None:
        raise ValidationError(entity_type.required_message)

    store = get_store()
    existing = store.first(entity_type.collection)
    doc_id = existing['id'] if existing else None
    old_public_id = None
    if existing and existing.get(entity_type.media_field):
        old_public_id = public_id_from_url(existing[entity_type.media_field], entity_type.folder)

    url = upload_media(
        new_file.read(), entity_type.folder,
        filename=new_file.filename,
        resource_type=entity_type.resource_type,
        file_format=entity_type.file_format,
    )

    now = now_ms()
    if doc_id:
        store.update(entity_type.collection, doc_id, {entity_type.media_field: url, 'updatedAt': now})
    else:
        doc_id = store.create(entity_type.collection, {
            entity_type.media_field: url,
            'createdAt': now,
            'updatedAt': now,
        })

    LoggingService.log_user_action(entity_type.collection, f"{entity_type.name} uploaded", details={'id': doc_id})

    remove_media(old_public_id)
    return {'success': True, 'url': url}


def delete(entity_type, entity_id):
    """Delete a record and, best effort, its stored asset."""
    if not entity_id:
        return {'success': False, 'message': f"{entity_type.name.title()} id is missing"}

    store = get_store()
    try:
        record = store.get(entity_type.collection, entity_id)
    except WorkflowError as e:
        LoggingService.warning(entity_type.collection, f"Lookup before delete failed: {e}")
        record = None

    media_url = (record or {}).get(entity_type.media_field)
    if media_url:
        remove_media(public_id_from_url(media_url, entity_type.delete_match_folder, entity_type.folder))

    store.delete(entity_type.collection, entity_id)
    LoggingService.log_user_action(entity_type.collection, f"{entity_type.name} deleted", details={'id': entity_id})

    return {'success': True, 'message': f"{entity_type.name.title()} deleted successfully"}


def fetch(entity_type):
    records = get_store().list(entity_type.collection)
    return {
        'success': True,
        'message': f"Fetched {entity_type.label} successfully",
        'data': records,
    }
