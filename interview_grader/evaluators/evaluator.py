"""
Answer Evaluator - main evaluation class for one interview answer

This is the primary interface for grading an answer. It coordinates:
- Text metrics (pace, fillers)
- STAR rubric analysis
- Relevance scoring (remote when configured, local otherwise)
- Attention analysis
- Per-question grading and suggestions
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from ..config import RemoteSettings, load_remote_settings
from ..lexicon import RoleSkill, parse_role
from .api_relevance import score_relevance
from .attention import analyze_attention, get_attention_suggestions
from .relevance import RelevanceInput
from .results import AnswerSnapshot, QuestionResult
from .scoring import grade_question
from .star_components import StarAnalysis, analyze_star
from .text_metrics import analyze_text, get_text_suggestions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnswerEvaluation:
    """Graded QuestionResult plus the coaching that goes with it"""
    question_result: QuestionResult
    star_analysis: Optional[StarAnalysis]
    suggestions: Tuple[str, ...]


class AnswerEvaluator:
    """
    Grades answers for one role

    Usage:
        evaluator = AnswerEvaluator('backend_node')
        evaluation = evaluator.evaluate(
            AnswerSnapshot(transcript="In my last project...", duration_seconds=90),
            question="How do you design a rate limiter for an API?",
        )
        print(evaluation.question_result.grade)
    """

    def __init__(
        self,
        role: Union[str, RoleSkill],
        settings: Optional[RemoteSettings] = None
    ):
        self.role = parse_role(role)
        self.settings = settings or load_remote_settings()

    def evaluate(
        self,
        snapshot: AnswerSnapshot,
        question: str,
        question_id: Optional[str] = None,
        status: str = 'answered'
    ) -> AnswerEvaluation:
        """
        Main evaluation pipeline

        Args:
            snapshot: Frozen transcript, duration and head-tracking signals
            question: Question text that was asked
            question_id: Stable id from the question bank (defaults to "q")
            status: "answered" or "timeout"

        Returns:
            AnswerEvaluation with the graded QuestionResult and suggestions
        """
        if status == 'skipped':
            raise ValueError("Use skip() for skipped questions")

        text_metrics = analyze_text(snapshot.transcript, snapshot.duration_seconds)
        star_analysis = analyze_star(snapshot.transcript)
        attention = analyze_attention(snapshot.head_variance, snapshot.gaze_drift)
        relevance = score_relevance(
            RelevanceInput(transcript=snapshot.transcript, role=self.role, question=question),
            self.settings,
        )

        result = grade_question(QuestionResult(
            question_id=question_id or 'q',
            question=question,
            transcript=snapshot.transcript,
            duration_seconds=snapshot.duration_seconds,
            status=status,
            text_metrics=text_metrics,
            star_scores=star_analysis.scores,
            attention=attention,
            relevance=relevance,
        ))

        logger.info(
            "%s: %s wpm (%s), STAR %s, attention %s, relevance %s (%s) -> %s (%s)",
            result.question_id, text_metrics.wpm, text_metrics.pace_rating,
            star_analysis.overall, attention.attention_score,
            relevance.score, relevance.source, result.overall_score, result.grade,
        )

        suggestions: List[str] = []
        suggestions.extend(get_text_suggestions(text_metrics))
        suggestions.extend(star_analysis.suggestions)
        suggestions.extend(get_attention_suggestions(attention))

        return AnswerEvaluation(
            question_result=result,
            star_analysis=star_analysis,
            suggestions=tuple(suggestions),
        )

    def skip(self, question: str, question_id: Optional[str] = None) -> AnswerEvaluation:
        """Record a skipped question (always 0 / F)"""
        result = grade_question(QuestionResult(
            question_id=question_id or 'q',
            question=question,
            transcript='',
            duration_seconds=0,
            status='skipped',
        ))
        logger.info("%s: skipped", result.question_id)
        return AnswerEvaluation(question_result=result, star_analysis=None, suggestions=())
