"""Load quiz and answer documents from JSON files."""
import json
import logging

from config import settings
from engine.grading import RULE_MODES

log = logging.getLogger(__name__)


class QuizDocumentError(ValueError):
    """A quiz or answer document is unreadable or missing a section."""


def _read_json(path):
    try:
        with open(path, encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise QuizDocumentError(f'{path}: invalid JSON ({e})') from e
    except OSError as e:
        raise QuizDocumentError(f'{path}: {e.strerror or e}') from e


def load_quiz(path=None):
    """Read the quiz document: meta, mcq list, fillins list, optional essay."""
    path = path or settings.QUIZ_PATH
    doc = _read_json(path)
    if not isinstance(doc, dict):
        raise QuizDocumentError(f'{path}: quiz document must be an object')
    for section in ('mcq', 'fillins'):
        if not isinstance(doc.get(section), list):
            raise QuizDocumentError(f'{path}: missing "{section}" list')
    log.info('Loaded quiz %s: %d mcq, %d fill-in', path,
             len(doc['mcq']), len(doc['fillins']))
    return doc


def load_answers(path=None):
    """Read the answer document: mcq index map and fill-in rule map."""
    path = path or settings.ANSWERS_PATH
    doc = _read_json(path)
    if not isinstance(doc, dict):
        raise QuizDocumentError(f'{path}: answer document must be an object')
    for section in ('mcq', 'fillins'):
        if not isinstance(doc.get(section), dict):
            raise QuizDocumentError(f'{path}: missing "{section}" map')
    for qid, rule in doc['fillins'].items():
        mode = rule.get('mode') if isinstance(rule, dict) else None
        if mode not in RULE_MODES:
            # Kept as-is: the grader treats it as always wrong
            log.warning('Fill-in %s has unrecognized rule mode %r', qid, mode)
    return doc


def fillin_rule(answers, question_id):
    return (answers.get('fillins') or {}).get(question_id)


def find_fillin(quiz, question_id):
    for item in quiz.get('fillins') or []:
        if item.get('id') == question_id:
            return item
    return None
