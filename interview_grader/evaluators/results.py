"""
Result records for answers and sessions.

QuestionResult is created once per answered/skipped question and only ever
gains its overall_score/grade afterwards (see scoring.grade_question).
SessionResult owns its QuestionResults and becomes read-only once the
overall grade is attached.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from .attention import AttentionMetrics
from .relevance import RelevanceResult
from .star_components import StarScores
from .text_metrics import TextMetrics

QUESTION_STATUSES = ('answered', 'skipped', 'timeout')


class SessionFinishedError(RuntimeError):
    """Raised when a finished session is modified."""


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class AnswerSnapshot:
    """Immutable inputs for scoring one answer"""
    transcript: str
    duration_seconds: float
    head_variance: float = 0.0
    gaze_drift: float = 0.0

    def __post_init__(self):
        if not isinstance(self.transcript, str):
            raise TypeError("transcript must be a string")
        for name in ('duration_seconds', 'head_variance', 'gaze_drift'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")


@dataclass
class QuestionResult:
    """Everything measured for one question"""
    question_id: str
    question: str
    transcript: str
    duration_seconds: float
    status: str
    text_metrics: Optional[TextMetrics] = None
    star_scores: Optional[StarScores] = None
    attention: Optional[AttentionMetrics] = None
    relevance: Optional[RelevanceResult] = None
    overall_score: Optional[int] = None
    grade: Optional[str] = None

    def __post_init__(self):
        if self.status not in QUESTION_STATUSES:
            raise ValueError(
                f"Unknown status: '{self.status}'. Available: {', '.join(QUESTION_STATUSES)}"
            )

    @property
    def is_skipped(self) -> bool:
        return self.status == 'skipped'

    @property
    def is_graded(self) -> bool:
        return self.overall_score is not None and self.grade is not None

    def to_dict(self) -> Dict:
        return {
            'id': self.question_id,
            'question': self.question,
            'transcript': self.transcript,
            'durationSeconds': self.duration_seconds,
            'status': self.status,
            'textMetrics': self.text_metrics.to_dict() if self.text_metrics else None,
            'starScores': self.star_scores.to_dict() if self.star_scores else None,
            'attention': self.attention.to_dict() if self.attention else None,
            'relevance': self.relevance.to_dict() if self.relevance else None,
            'overallScore': self.overall_score,
            'grade': self.grade,
        }


@dataclass(frozen=True)
class SessionAggregates:
    avg_wpm: int = 0
    avg_attention: int = 0
    avg_relevance: int = 0
    star_mean: int = 0
    filler_per_min: float = 0.0
    answered_count: int = 0
    skipped_count: int = 0

    def to_dict(self) -> Dict:
        return {
            'avgWpm': self.avg_wpm,
            'avgAttention': self.avg_attention,
            'avgRelevance': self.avg_relevance,
            'starMean': self.star_mean,
            'fillerPerMin': self.filler_per_min,
            'answeredCount': self.answered_count,
            'skippedCount': self.skipped_count,
        }


@dataclass(frozen=True)
class SessionOverall:
    score: int
    grade: str
    summary: Tuple[str, ...]
    aggregates: SessionAggregates

    def to_dict(self) -> Dict:
        return {
            'score': self.score,
            'grade': self.grade,
            'summary': list(self.summary),
            'aggregates': self.aggregates.to_dict(),
        }


@dataclass
class SessionResult:
    """Ordered question results plus the overall grade once finished"""
    role: str
    started_at: str = field(default_factory=utc_now)
    ended_at: Optional[str] = None
    questions: List[QuestionResult] = field(default_factory=list)
    overall: Optional[SessionOverall] = None

    @property
    def is_finished(self) -> bool:
        return self.overall is not None

    @property
    def status(self) -> str:
        return 'finished' if self.is_finished else 'active'

    def append(self, question_result: QuestionResult) -> None:
        if self.is_finished:
            raise SessionFinishedError("Session is finished; no more questions can be added")
        self.questions.append(question_result)

    def finish(self, overall: SessionOverall) -> None:
        if self.is_finished:
            raise SessionFinishedError("Session already has an overall grade")
        self.overall = overall
        self.ended_at = utc_now()

    def to_dict(self) -> Dict:
        return {
            'role': self.role,
            'skill': self.role,
            'startedAt': self.started_at,
            'endedAt': self.ended_at,
            'status': self.status,
            'questions': [q.to_dict() for q in self.questions],
            'overall': self.overall.to_dict() if self.overall else None,
        }
