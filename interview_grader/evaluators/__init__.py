"""
Answer Evaluation & Grading Engine

Turns a transcript (plus timing and head-tracking signals) into:
- Text metrics: word count, wpm, pace rating, filler words
- STAR rubric scores (Situation, Task, Action, Result)
- A relevance score and verdict (local heuristic, optional remote scorer)
- An attention score
- A per-question composite and letter grade
- A session-level grade with summary feedback

Usage:
    from interview_grader.evaluators import AnswerEvaluator, AnswerSnapshot

    evaluator = AnswerEvaluator('frontend_react')
    evaluation = evaluator.evaluate(
        AnswerSnapshot(transcript="In my last project...", duration_seconds=90, head_variance=5),
        question="Explain reconciliation and keys in React.",
    )
    print(evaluation.question_result.overall_score)  # 0-100
    print(evaluation.question_result.grade)          # A-F
"""

from .text_metrics import TextMetrics, analyze_text, rate_pace, count_filler_words, calculate_wpm
from .star_components import StarScores, StarAnalysis, analyze_star, detect_star_structure
from .similarity import lexical_similarity
from .relevance import (
    RelevanceInput, RelevanceResult, score_relevance_local, verdict_for,
    detect_off_topic_markers,
)
from .api_relevance import RemoteScoringError, score_relevance, fetch_remote_relevance
from .attention import AttentionMetrics, analyze_attention
from .results import (
    AnswerSnapshot, QuestionResult, SessionAggregates, SessionOverall, SessionResult,
    SessionFinishedError,
)
from .scoring import (
    pace_score, filler_score, letter_grade, composite_score,
    grade_question, compute_overall,
)
from .feedback import build_session_summary, generate_session_report, export_questions_csv
from .evaluator import AnswerEvaluator, AnswerEvaluation

__version__ = "1.0.0"

__all__ = [
    # Main interface
    'AnswerEvaluator',
    'AnswerEvaluation',
    'AnswerSnapshot',

    # Components
    'TextMetrics',
    'analyze_text',
    'rate_pace',
    'count_filler_words',
    'calculate_wpm',
    'StarScores',
    'StarAnalysis',
    'analyze_star',
    'detect_star_structure',
    'lexical_similarity',
    'RelevanceInput',
    'RelevanceResult',
    'score_relevance_local',
    'score_relevance',
    'fetch_remote_relevance',
    'verdict_for',
    'detect_off_topic_markers',
    'RemoteScoringError',
    'AttentionMetrics',
    'analyze_attention',

    # Grading
    'QuestionResult',
    'SessionAggregates',
    'SessionOverall',
    'SessionResult',
    'SessionFinishedError',
    'pace_score',
    'filler_score',
    'letter_grade',
    'composite_score',
    'grade_question',
    'compute_overall',

    # Feedback
    'build_session_summary',
    'generate_session_report',
    'export_questions_csv',
]
