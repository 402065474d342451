"""Grade a quiz submission: per-question verdicts plus the objective summary."""
import logging

from engine.grading import (describe_fillin_rule, grade_fillin, grade_mcq,
                            summarize_objective)
from models.quiz import fillin_rule

logger = logging.getLogger(__name__)


def check_fillin(answers, question_id, user_input):
    """Instant check of one fill-in answer.

    Returns dict with: question_id, is_correct, user_input, answer_hint.
    """
    rule = fillin_rule(answers, question_id)
    is_correct = grade_fillin(user_input, rule) if rule else False
    logger.debug('Checked fill-in %s: %r -> %s', question_id, user_input, is_correct)
    return {
        'question_id': question_id,
        'is_correct': is_correct,
        'user_input': user_input,
        'answer_hint': describe_fillin_rule(rule),
    }


def grade_submission(quiz, answers, user_mcq, user_fillins):
    """Grade every objective question for one submission.

    Returns dict with: summary, mcq_results, fillin_results, answer_hints.
    """
    user_mcq = user_mcq or {}
    user_fillins = user_fillins or {}
    mcq_answers = answers.get('mcq') or {}

    mcq_results = {
        q['id']: grade_mcq(user_mcq.get(q['id']), mcq_answers.get(q['id']))
        for q in quiz.get('mcq') or []
    }
    fillin_results = {}
    answer_hints = {}
    for q in quiz.get('fillins') or []:
        rule = fillin_rule(answers, q['id'])
        fillin_results[q['id']] = grade_fillin(user_fillins.get(q['id']), rule) if rule else False
        answer_hints[q['id']] = describe_fillin_rule(rule)

    summary = summarize_objective(quiz, answers, user_mcq, user_fillins)
    logger.info('Graded submission: %s / %s (mcq %s/%s, fill-in %s/%s)',
                summary['total_score'], summary['total_possible'],
                summary['mcq']['score'], summary['mcq']['total'],
                summary['fillins']['score'], summary['fillins']['total'])

    return {
        'summary': summary,
        'mcq_results': mcq_results,
        'fillin_results': fillin_results,
        'answer_hints': answer_hints,
    }
