"""Grading API — quiz document, per-question check, full submission."""
import logging

from flask import Blueprint, current_app, jsonify, request

from models.quiz import find_fillin
from services import grading_service

logger = logging.getLogger(__name__)
grading_bp = Blueprint('grading', __name__)


def _error(message, status):
    return jsonify({'error': message}), status


@grading_bp.route('/quiz')
def quiz():
    return jsonify(current_app.config['QUIZ'])


@grading_bp.route('/fillins/<question_id>/check', methods=['POST'])
def check_fillin(question_id):
    quiz_doc = current_app.config['QUIZ']
    if find_fillin(quiz_doc, question_id) is None:
        return _error(f'Unknown fill-in question: {question_id}', 404)
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _error('Expected a JSON object body', 400)
    result = grading_service.check_fillin(
        current_app.config['ANSWERS'], question_id, payload.get('value'),
    )
    return jsonify(result)


@grading_bp.route('/submit', methods=['POST'])
def submit():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return _error('Expected a JSON object body', 400)
    user_mcq = payload.get('mcq') or {}
    user_fillins = payload.get('fillins') or {}
    if not isinstance(user_mcq, dict) or not isinstance(user_fillins, dict):
        return _error('"mcq" and "fillins" must be objects', 400)

    result = grading_service.grade_submission(
        current_app.config['QUIZ'], current_app.config['ANSWERS'],
        user_mcq, user_fillins,
    )
    return jsonify(result)
