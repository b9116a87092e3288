"""
Skills Admin Routes
===================

Fields: name, category, image (optional URL).
"""

from flask import request

from folio.core import workflow
from folio.core.config import Config
from folio.core.workflow import EntityType, text_field, workflow_result
from folio.modules.auth.guard import admin_required, admin_api_required, result_response
from . import skills_bp

SKILL = EntityType(
    'skill',
    collection=Config.SKILLS_COLLECTION,
    folder='skills',
    fields={'name': text_field, 'category': text_field},
    required=('name', 'category'),
    required_message="Name and category are required",
)


@admin_required
@workflow_result('skills')
def add_or_update_skill(form, files=None, skill_id=None):
    return workflow.upsert(SKILL, form, files, skill_id)


@admin_required
@workflow_result('skills')
def delete_skill(skill_id):
    return workflow.delete(SKILL, skill_id)


@workflow_result('skills')
def fetch_skills():
    return workflow.fetch(SKILL)


def group_by_category(skills):
    """{category: [skill, ...]} in first-seen order; blank category is 'Other'"""
    grouped = {}
    for skill in skills:
        grouped.setdefault(skill.get('category') or 'Other', []).append(skill)
    return grouped


# ===== Routes =====

@skills_bp.route('/api/skills', methods=['GET'])
@admin_api_required
def list_skills():
    return result_response(fetch_skills())


@skills_bp.route('/api/skills', methods=['POST'])
def create_skill():
    return result_response(add_or_update_skill(request.form, request.files))


@skills_bp.route('/api/skills/<skill_id>', methods=['PUT'])
def update_skill(skill_id):
    return result_response(add_or_update_skill(request.form, request.files, skill_id))


@skills_bp.route('/api/skills/<skill_id>', methods=['DELETE'])
def remove_skill(skill_id):
    return result_response(delete_skill(skill_id))
