from flask import request

from folio.core import workflow
from folio.core.config import Config
from folio.core.database import get_store
from folio.core.workflow import EntityType, workflow_result
from folio.modules.auth.guard import admin_required, admin_api_required, result_response
from . import resume_bp

RESUME = EntityType(
    'resume',
    collection=Config.RESUME_COLLECTION,
    folder='resume',
    fields={},
    required_message="No resume file provided",
    media_field='url',
    file_field='resume',
    file_format='pdf',
)


@admin_required
@workflow_result('resume')
def add_or_update_resume(files):
    return workflow.upsert_singleton(RESUME, files)


@workflow_result('resume')
def fetch_resume():
    """The current resume document, or None"""
    return {'success': True, 'data': get_store().first(RESUME.collection)}


@resume_bp.route('/api/resume', methods=['GET'])
@admin_api_required
def get_resume():
    return result_response(fetch_resume())


@resume_bp.route('/api/resume', methods=['POST'])
def upload_resume():
    return result_response(add_or_update_resume(request.files))
