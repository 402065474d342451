"""Grading for single-choice and fill-in questions.

Fill-in rules are dicts tagged by 'mode':
  text   — answer / accept list, optional caseInsensitive / normalizeZh
  regex  — pattern tested against the raw input
  number — answer with optional tolerance
  date   — answer / accept list of calendar dates in any supported format

Grading never raises: malformed input or rules grade as False.
"""
import logging
import re
import sys

from config.settings import GRADING_DEFAULTS
from engine.normalize import equals_text, normalize_number_input, parse_date_string

logger = logging.getLogger(__name__)

RULE_MODES = ('text', 'regex', 'number', 'date')

# Guards tolerance=0 against float representation error
FLOAT_EPSILON = sys.float_info.epsilon


def _is_number(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _option(rule, key, default):
    """Rule option with None treated as missing."""
    value = rule.get(key)
    return default if value is None else value


def _as_text(value):
    """String form of a typed-in value; 3.0 → '3' to match what was shown."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_blank(value):
    return value is None or value == ''


def grade_mcq(user_choice, answer_index):
    """Exact index comparison; no choice is always wrong."""
    if _is_blank(user_choice) or answer_index is None:
        return False
    if isinstance(user_choice, int) and isinstance(answer_index, int):
        return user_choice == answer_index
    try:
        return float(user_choice) == float(answer_index)
    except (TypeError, ValueError, OverflowError):
        return False


def _grade_text(value, rule):
    case_insensitive = _option(rule, 'caseInsensitive', GRADING_DEFAULTS['case_insensitive'])
    normalize_zh = _option(rule, 'normalizeZh', GRADING_DEFAULTS['normalize_zh'])
    accept = rule.get('accept') or []
    if accept:
        return any(
            equals_text(value, str(candidate), case_insensitive=case_insensitive,
                        normalize_zh=normalize_zh)
            for candidate in accept
        )
    if rule.get('answer'):
        return equals_text(value, str(rule['answer']), case_insensitive=case_insensitive,
                           normalize_zh=normalize_zh)
    return False


def _grade_regex(value, rule):
    pattern = rule.get('pattern')
    try:
        regex = re.compile(pattern)
    except (re.error, TypeError) as e:
        logger.warning('Invalid regex pattern in rule %r: %s', pattern, e)
        return False
    return regex.search(value) is not None


def _grade_number(user_input, value, rule):
    user_number = user_input if _is_number(user_input) else normalize_number_input(value)
    if user_number is None:
        return False
    answer = rule.get('answer')
    tolerance = _option(rule, 'tolerance', GRADING_DEFAULTS['tolerance'])
    if not _is_number(answer) or not _is_number(tolerance):
        logger.debug('Number rule without numeric answer/tolerance: %r', rule)
        return False
    try:
        return abs(user_number - answer) <= tolerance + FLOAT_EPSILON
    except OverflowError:
        return False


def _grade_date(value, rule):
    candidates = [rule.get('answer')] + list(rule.get('accept') or [])
    candidates = [c for c in candidates if c]
    normalized_user = parse_date_string(value)
    if not normalized_user or not candidates:
        return False
    return any(parse_date_string(str(c)) == normalized_user for c in candidates)


def grade_fillin(user_input, rule):
    """Grade one fill-in response against its rule.

    Args:
        user_input: raw string or number as typed; None or '' is unanswered.
        rule: answer rule dict (see module docstring).

    Returns True only for a definite match.
    """
    if _is_blank(user_input) or not isinstance(rule, dict):
        return False
    try:
        value = _as_text(user_input) if _is_number(user_input) else str(user_input)
    except ValueError:
        # int beyond the interpreter's str() digit limit
        return False

    mode = rule.get('mode')
    if mode == 'text':
        return _grade_text(value, rule)
    if mode == 'regex':
        return _grade_regex(value, rule)
    if mode == 'number':
        return _grade_number(user_input, value, rule)
    if mode == 'date':
        return _grade_date(value, rule)

    logger.debug('Unrecognized fill-in rule mode %r', mode)
    return False


def question_score(question):
    """Weight of a question; 1 unless the quiz declares a score."""
    score = question.get('score')
    return GRADING_DEFAULTS['default_score'] if score is None else score


def _empty_section():
    return {'correct_ids': [], 'incorrect_ids': [], 'score': 0, 'total': 0}


def summarize_objective(quiz, answers, user_mcq=None, user_fillins=None):
    """Roll per-question verdicts into section and whole-quiz scores.

    Args:
        quiz: {'mcq': [{'id', 'score'?}, ...], 'fillins': [...]}
        answers: {'mcq': {id: index}, 'fillins': {id: rule}}
        user_mcq: {id: chosen index or None}
        user_fillins: {id: typed value}

    A question the user never touched lands in neither id list, so
    incorrect_ids means attempted and wrong.

    Returns {'mcq': section, 'fillins': section, 'total_score', 'total_possible'}.
    """
    user_mcq = user_mcq or {}
    user_fillins = user_fillins or {}
    mcq_answers = answers.get('mcq') or {}
    fillin_rules = answers.get('fillins') or {}

    mcq = _empty_section()
    for item in quiz.get('mcq') or []:
        qid = item['id']
        user = user_mcq.get(qid)
        score = question_score(item)
        mcq['total'] += score
        if grade_mcq(user, mcq_answers.get(qid)):
            mcq['score'] += score
            mcq['correct_ids'].append(qid)
        elif not _is_blank(user):
            mcq['incorrect_ids'].append(qid)

    fillins = _empty_section()
    for item in quiz.get('fillins') or []:
        qid = item['id']
        user = user_fillins.get(qid)
        rule = fillin_rules.get(qid)
        score = question_score(item)
        fillins['total'] += score
        if rule and grade_fillin(user, rule):
            fillins['score'] += score
            fillins['correct_ids'].append(qid)
        elif not _is_blank(user):
            fillins['incorrect_ids'].append(qid)

    return {
        'mcq': mcq,
        'fillins': fillins,
        'total_score': mcq['score'] + fillins['score'],
        'total_possible': mcq['total'] + fillins['total'],
    }


def compute_objective_score(quiz, answers, user_mcq=None, user_fillins=None):
    return summarize_objective(quiz, answers, user_mcq, user_fillins)['total_score']


def get_question_score_map(quiz):
    """Per-section {question id: weight}."""
    return {
        'mcq': {q['id']: question_score(q) for q in quiz.get('mcq') or []},
        'fillins': {q['id']: question_score(q) for q in quiz.get('fillins') or []},
    }


def describe_fillin_rule(rule):
    """Readable summary of what a rule accepts, for the show-answers view."""
    if not rule:
        return 'No answer available'
    mode = rule.get('mode')
    accept = rule.get('accept') or []
    if mode == 'number':
        text = f"Answer: {rule.get('answer')}"
        if rule.get('tolerance'):
            text += f" (tolerance ±{rule['tolerance']})"
        return text
    if mode == 'text':
        if accept:
            return 'Accepted: ' + ', '.join(str(a) for a in accept)
        return f"Answer: {rule.get('answer') or '(not provided)'}"
    if mode == 'date':
        if accept:
            return (f"Standard: {rule.get('answer') or ''}, accepted: "
                    + ', '.join(str(a) for a in accept))
        return f"Standard date: {rule.get('answer') or '(not provided)'}"
    if mode == 'regex':
        return f"Matches pattern: {rule.get('pattern')}"
    return 'Unrecognized answer rule'
