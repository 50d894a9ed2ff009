"""
Grading - per-question composite and session aggregate

Per question:
    composite = 0.35 × relevance + 0.35 × STAR mean + 0.15 × attention
              + 0.10 × pace score + 0.05 × filler score

Session:
    composite = mean of the answered questions' composites
"""

import logging
from typing import List, Sequence

from ..config import (
    COMPOSITE_WEIGHTS, IDEAL_WPM_MIN, IDEAL_WPM_MAX, ZERO_WPM_LOW, ZERO_WPM_HIGH,
    FILLERS_PER_MIN_FOR_ZERO, GRADE_THRESHOLDS, FAILING_GRADE,
)
from ..utils import clamp, mean, round_half_up
from .feedback import build_session_summary
from .results import QuestionResult, SessionAggregates, SessionOverall

logger = logging.getLogger(__name__)


def pace_score(wpm: float) -> int:
    """100 inside 110-150 wpm, linear ramps down to 0 at 70 and 200 wpm"""
    if IDEAL_WPM_MIN <= wpm <= IDEAL_WPM_MAX:
        return 100
    left = clamp((wpm - ZERO_WPM_LOW) / (IDEAL_WPM_MIN - ZERO_WPM_LOW), 0, 1) if wpm < IDEAL_WPM_MIN else 1
    right = clamp((ZERO_WPM_HIGH - wpm) / (ZERO_WPM_HIGH - IDEAL_WPM_MAX), 0, 1) if wpm > IDEAL_WPM_MAX else 1
    return round_half_up(100 * min(left, right))


def filler_score(filler_per_min: float) -> int:
    """0 fillers/min -> 100, 10+ fillers/min -> 0"""
    return int(clamp(round_half_up(100 * (1 - filler_per_min / FILLERS_PER_MIN_FOR_ZERO)), 0, 100))


def letter_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return FAILING_GRADE


def composite_score(
    relevance: float,
    star_mean: float,
    attention: float,
    pace: float,
    filler: float
) -> int:
    """Weighted composite of the five component scores (all 0-100)"""
    w = COMPOSITE_WEIGHTS
    raw = (
        w['relevance'] * relevance
        + w['star'] * star_mean
        + w['attention'] * attention
        + w['pace'] * pace
        + w['filler'] * filler
    )
    return round_half_up(raw)


# ==================== PER QUESTION ====================

def _question_filler_rate(result: QuestionResult) -> float:
    return result.text_metrics.filler_rate if result.text_metrics else 0.0


def _question_components(result: QuestionResult):
    """(relevance, star_mean, attention, wpm, filler_per_min), missing metrics count as 0"""
    return (
        result.relevance.score if result.relevance else 0,
        result.star_scores.mean if result.star_scores else 0.0,
        result.attention.attention_score if result.attention else 0,
        result.text_metrics.wpm if result.text_metrics else 0,
        _question_filler_rate(result),
    )


def question_composite(result: QuestionResult) -> int:
    """Composite for one question; skipped questions are always 0"""
    if result.is_skipped:
        return 0
    relevance, star_mean, attention, wpm, filler_per_min = _question_components(result)
    return composite_score(
        relevance, star_mean, attention, pace_score(wpm), filler_score(filler_per_min)
    )


def grade_question(result: QuestionResult) -> QuestionResult:
    """
    Attach overall_score and grade to a QuestionResult.

    Only fills in what is missing, so grading twice never changes a result.
    """
    if result.is_graded:
        return result

    if result.overall_score is None:
        result.overall_score = question_composite(result)
    if result.grade is None:
        result.grade = FAILING_GRADE if result.is_skipped else letter_grade(result.overall_score)

    logger.debug("%s graded %s (%s)", result.question_id, result.overall_score, result.grade)
    return result


# ==================== SESSION ====================

def compute_overall(questions: Sequence[QuestionResult]) -> SessionOverall:
    """
    Session grade from every question result (skipped ones included).

    The composite is the mean of the answered questions' own composites,
    so it always agrees with the per-question grades.
    """
    graded = [grade_question(q) for q in questions]
    answered = [q for q in graded if not q.is_skipped]

    composite = round_half_up(mean([q.overall_score for q in answered]))

    components = [_question_components(q) for q in answered]
    aggregates = SessionAggregates(
        avg_wpm=round_half_up(mean([c[3] for c in components])),
        avg_attention=round_half_up(mean([c[2] for c in components])),
        avg_relevance=round_half_up(mean([c[0] for c in components])),
        star_mean=round_half_up(mean([c[1] for c in components])),
        filler_per_min=round_half_up(mean([c[4] for c in components]) * 10) / 10,
        answered_count=len(answered),
        skipped_count=len(graded) - len(answered),
    )

    summary: List[str] = build_session_summary(composite, aggregates)

    return SessionOverall(
        score=composite,
        grade=letter_grade(composite),
        summary=tuple(summary),
        aggregates=aggregates,
    )
