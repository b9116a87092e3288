"""
Projects Admin Routes
=====================

`skills` holds skill ids; nothing checks that they still exist.
"""

from flask import request

from folio.core import workflow
from folio.core.config import Config
from folio.core.workflow import EntityType, text_field, json_list_field, workflow_result
from folio.modules.auth.guard import admin_required, admin_api_required, result_response
from . import projects_bp

PROJECT = EntityType(
    'project',
    collection=Config.PROJECTS_COLLECTION,
    folder='projects',
    fields={
        'title': text_field,
        'problem': text_field,
        'description': text_field,
        'skills': json_list_field,
        'githubUrl': text_field,
        'demoUrl': text_field,
        'tagline': text_field,
    },
    required=('title', 'problem', 'description'),
    required_message="Title, Problem, and Description are required",
    # Image URLs are matched against the skills folder on delete
    delete_match_folder='skills',
)


@admin_required
@workflow_result('projects')
def add_or_update_project(form, files=None, project_id=None):
    return workflow.upsert(PROJECT, form, files, project_id)


@admin_required
@workflow_result('projects')
def delete_project(project_id):
    return workflow.delete(PROJECT, project_id)


@workflow_result('projects')
def fetch_projects():
    return workflow.fetch(PROJECT)


# ===== Routes =====

@projects_bp.route('/api/projects', methods=['GET'])
@admin_api_required
def list_projects():
    return result_response(fetch_projects())


@projects_bp.route('/api/projects', methods=['POST'])
def create_project():
    return result_response(add_or_update_project(request.form, request.files))


@projects_bp.route('/api/projects/<project_id>', methods=['PUT'])
def update_project(project_id):
    return result_response(add_or_update_project(request.form, request.files, project_id))


@projects_bp.route('/api/projects/<project_id>', methods=['DELETE'])
def remove_project(project_id):
    return result_response(delete_project(project_id))
