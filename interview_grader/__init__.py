"""
Interview Grader

Grades mock interview answers: speaking pace, filler words, STAR structure,
relevance to the question and on-camera attention, rolled up into
per-question and session letter grades.

Usage:
    from interview_grader import InterviewSession

    session = InterviewSession('data_sql')
    session.begin_question()
    session.record("At my last company the reporting queries were slow...")
    session.finalize_answer(duration_seconds=80, head_variance=6, gaze_drift=12)
    print(session.end().overall.grade)
"""

from .evaluators import (
    AnswerEvaluator, AnswerEvaluation, AnswerSnapshot,
    QuestionResult, SessionResult, compute_overall, grade_question,
    __version__,
)
from .lexicon import RoleSkill, UnsupportedRoleError, list_roles
from .session import InterviewSession, SessionFinishedError

__all__ = [
    'AnswerEvaluator',
    'AnswerEvaluation',
    'AnswerSnapshot',
    'QuestionResult',
    'SessionResult',
    'compute_overall',
    'grade_question',
    'InterviewSession',
    'SessionFinishedError',
    'RoleSkill',
    'UnsupportedRoleError',
    'list_roles',
    '__version__',
]
