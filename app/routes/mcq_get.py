import logging

from flask import Blueprint, current_app, jsonify
from werkzeug.exceptions import HTTPException

from app import firestore_dao as dao
from app.decorators import auth_required, get_auth_context
from app.errors import Internal, QuizError
from app.forms import ListQueryForm, QuestionQueryForm, ScheduleQueryForm
from app.services import clock
from app.services.access import project_question
from app.services.pager import ListPager
from app.services.scheduling import ScheduleResolver

logger = logging.getLogger(__name__)

bp = Blueprint('mcq_get', __name__, url_prefix='/mcq-get')


def get_resolver():
    config = current_app.config
    return ScheduleResolver(
        current_app.extensions['slot_timetable'],
        clock.parse_offset(config['QUIZ_UTC_OFFSET']),
        dao.get_questions_for_week,
        week_start=config['QUIZ_WEEK_START'],
    )


def get_pager():
    config = current_app.config
    return ListPager(
        dao.list_questions,
        page_size=config['LIST_PAGE_SIZE'],
        partition_cap=config['LIST_PARTITION_CAP'],
    )


@bp.errorhandler(QuizError)
def handle_quiz_error(e):
    if isinstance(e, Internal):
        logger.error('Internal error: %s', e.message)
    return jsonify(e.to_dict()), e.status_code


@bp.errorhandler(Exception)
def handle_unexpected(e):
    if isinstance(e, HTTPException):
        return jsonify({'error': e.description}), e.code
    logger.exception('Unhandled error in %s', bp.name)
    err = Internal()
    return jsonify(err.to_dict()), err.status_code


@bp.route('/schedule')
@auth_required
def schedule():
    form = ScheduleQueryForm().validated()
    return jsonify(get_resolver().resolve(form.topic.data, get_auth_context()))


@bp.route('/question')
def question():
    form = QuestionQueryForm().validated()
    doc = dao.get_question(form.id.data)
    return jsonify({'response': project_question(doc, get_auth_context())})


@bp.route('/list')
def list_questions():
    form = ListQueryForm().validated()
    filters = form.filters()
    return jsonify(get_pager().list(filters, filters.get('cursor'), get_auth_context()))


@bp.route('/', defaults={'subpath': ''})
@bp.route('/<path:subpath>')
def not_found(subpath):
    return jsonify({'error': 'Not found'}), 404
