from flask import request

from folio.core import workflow
from folio.core.config import Config
from folio.core.workflow import EntityType, text_field, workflow_result
from folio.modules.auth.guard import admin_required, admin_api_required, result_response
from . import articles_bp

ARTICLE = EntityType(
    'article',
    collection=Config.ARTICLES_COLLECTION,
    folder='articles',
    fields={'title': text_field, 'tagline': text_field, 'description': text_field},
    required=('title',),
    required_message="Title is required",
    # Same skills-folder match as projects when deleting
    delete_match_folder='skills',
)


@admin_required
@workflow_result('articles')
def add_or_update_article(form, files=None, article_id=None):
    return workflow.upsert(ARTICLE, form, files, article_id)


@admin_required
@workflow_result('articles')
def delete_article(article_id):
    return workflow.delete(ARTICLE, article_id)


@workflow_result('articles')
def fetch_articles():
    return workflow.fetch(ARTICLE)


@articles_bp.route('/api/articles', methods=['GET'])
@admin_api_required
def list_articles():
    return result_response(fetch_articles())


@articles_bp.route('/api/articles', methods=['POST'])
def create_article():
    return result_response(add_or_update_article(request.form, request.files))


@articles_bp.route('/api/articles/<article_id>', methods=['PUT'])
def update_article(article_id):
    return result_response(add_or_update_article(request.form, request.files, article_id))


@articles_bp.route('/api/articles/<article_id>', methods=['DELETE'])
def remove_article(article_id):
    return result_response(delete_article(article_id))
