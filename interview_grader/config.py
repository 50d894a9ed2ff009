"""
Interview Grader Configuration
==============================

Scoring constants live at the top (weights, thresholds, bands).
Remote scoring settings are read from the environment at the bottom.
"""
import os
from dataclasses import dataclass
from typing import Optional


# =============================================================================
# TEXT METRICS
# =============================================================================

PACE_SLOW_BELOW = 110   # wpm < 110 -> slow
PACE_FAST_ABOVE = 150   # wpm > 150 -> fast

# =============================================================================
# STAR RUBRIC
# =============================================================================

# Distinct keyword matches -> base component score
STAR_MATCH_SCORES = {0: 0, 1: 40, 2: 70}
STAR_MAX_SCORE = 100
STAR_SENTENCE_BONUS = 2
STAR_LENGTH_BONUS_CAP = 20
STAR_MISSING_BELOW = 30

# =============================================================================
# RELEVANCE
# =============================================================================

MIN_MEANINGFUL_TOKENS = 10
SHORT_ANSWER_SCORE = 40
TOP_ROLE_KEYWORDS = 15
MAX_KEYWORDS_REPORTED = 10

SIMILARITY_WEIGHTS = {
    'token_set': 0.5,
    'bigram': 0.3,
    'partial': 0.2,
}

RELEVANCE_WEIGHTS = {
    'similarity': 0.5,
    'coverage': 0.5,
}

RUBRIC_BONUS_PER_COMPONENT = 5
RUBRIC_BONUS_THRESHOLD = 50
RUBRIC_BONUS_CAP = 15

HIGH_RUBRIC_THRESHOLD = 75
HIGH_RUBRIC_BOOSTS = {
    'three_high': 20,
    'two_high': 15,   # also needs mean >= TWO_HIGH_MIN_MEAN
    'high_mean': 10,  # mean >= HIGH_MEAN_MIN
}
TWO_HIGH_MIN_MEAN = 60
HIGH_MEAN_MIN = 70

OFF_TOPIC_PENALTY_PER_MARKER = 10
OFF_TOPIC_PENALTY_CAP = 10
VAGUE_SCALE_FACTOR = 100
VAGUE_PENALTY_CAP = 5

KEYWORD_BOOST = 5
KEYWORD_BOOST_MIN_COVERAGE = 50

ON_TOPIC_MIN = 60
PARTIAL_MIN = 40

# =============================================================================
# ATTENTION
# =============================================================================

HEAD_VARIANCE_MAX = 100.0  # degrees^2 variance
GAZE_DRIFT_MAX = 50.0      # pixel-equivalent drift
HEAD_WEIGHT = 0.7
GAZE_WEIGHT = 0.3
MOVEMENT_STABLE_BELOW = 20
MOVEMENT_MODERATE_BELOW = 50

# =============================================================================
# GRADING
# =============================================================================

COMPOSITE_WEIGHTS = {
    'relevance': 0.35,
    'star': 0.35,
    'attention': 0.15,
    'pace': 0.10,
    'filler': 0.05,
}

# Pace score: 100 inside the ideal band, linear falloff to 0 at the edges
IDEAL_WPM_MIN = 110
IDEAL_WPM_MAX = 150
ZERO_WPM_LOW = 70
ZERO_WPM_HIGH = 200

FILLERS_PER_MIN_FOR_ZERO = 10

GRADE_THRESHOLDS = (
    (90, 'A'),
    (80, 'B'),
    (70, 'C'),
    (60, 'D'),
)
FAILING_GRADE = 'F'

# Session summary checks
SUMMARY_STRONG_COMPOSITE = 80
SUMMARY_RELEVANCE_BELOW = 70
SUMMARY_STAR_BELOW = 65
SUMMARY_ATTENTION_BELOW = 65
SUMMARY_FILLERS_ABOVE = 5

# =============================================================================
# SESSION
# =============================================================================

MAX_QUESTIONS = 5
DEFAULT_QUESTION_SECONDS = 120

# =============================================================================
# REMOTE SCORING (optional)
# =============================================================================

REMOTE_BACKENDS = ('none', 'http', 'claude')
DEFAULT_API_URL = "http://localhost:3001"
DEFAULT_TIMEOUT_SECONDS = 5.0
DEFAULT_CLAUDE_MODEL = "claude-sonnet-4-20250514"


@dataclass(frozen=True)
class RemoteSettings:
    """Where (and whether) to send answers for enhanced relevance scoring."""
    backend: str = 'none'
    api_url: str = DEFAULT_API_URL
    timeout: float = DEFAULT_TIMEOUT_SECONDS
    api_key: Optional[str] = None
    model: str = DEFAULT_CLAUDE_MODEL

    @property
    def enabled(self) -> bool:
        return self.backend != 'none'


def load_remote_settings(backend: Optional[str] = None) -> RemoteSettings:
    """
    Build RemoteSettings from environment variables.

    Args:
        backend: Overrides INTERVIEW_GRADER_BACKEND when given
    """
    backend = (backend or os.environ.get('INTERVIEW_GRADER_BACKEND', 'none')).lower()
    if backend not in REMOTE_BACKENDS:
        raise ValueError(
            f"Unknown remote backend: '{backend}'. Available: {', '.join(REMOTE_BACKENDS)}"
        )

    timeout_raw = os.environ.get('INTERVIEW_GRADER_TIMEOUT')
    try:
        timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT_SECONDS
    except ValueError:
        raise ValueError(f"INTERVIEW_GRADER_TIMEOUT must be a number, got '{timeout_raw}'")

    return RemoteSettings(
        backend=backend,
        api_url=os.environ.get('INTERVIEW_GRADER_API_URL', DEFAULT_API_URL).rstrip('/'),
        timeout=timeout,
        api_key=os.environ.get('ANTHROPIC_API_KEY'),
        model=os.environ.get('INTERVIEW_GRADER_CLAUDE_MODEL', DEFAULT_CLAUDE_MODEL),
    )
