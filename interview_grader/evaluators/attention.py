"""
Attention - head stability and gaze drift

Inputs are already averaged over the answer window by the head-tracking
collaborator. Lower variance / drift means better attention.
"""

from dataclasses import dataclass
from typing import Dict, List

from ..config import (
    HEAD_VARIANCE_MAX, GAZE_DRIFT_MAX, HEAD_WEIGHT, GAZE_WEIGHT,
    MOVEMENT_STABLE_BELOW, MOVEMENT_MODERATE_BELOW,
)
from ..utils import clamp, map_range, round_half_up


@dataclass(frozen=True)
class AttentionMetrics:
    head_variance: float
    gaze_drift: float
    attention_score: int   # 0-100
    movement_rating: str   # "stable", "moderate", "excessive"

    def to_dict(self) -> Dict:
        return {
            'headVariance': self.head_variance,
            'gazeDrift': self.gaze_drift,
            'attentionScore': self.attention_score,
            'movementRating': self.movement_rating,
        }


def _inverse_subscore(value: float, domain_max: float) -> float:
    return map_range(clamp(value, 0, domain_max), 0, domain_max, 100, 0)


def calculate_attention_score(head_variance: float, gaze_drift: float) -> int:
    """Weighted inverse of head variance (70%) and gaze drift (30%)"""
    head_score = _inverse_subscore(head_variance, HEAD_VARIANCE_MAX)
    gaze_score = _inverse_subscore(gaze_drift, GAZE_DRIFT_MAX)
    score = round_half_up(HEAD_WEIGHT * head_score + GAZE_WEIGHT * gaze_score)
    return int(clamp(score, 0, 100))


def rate_movement(head_variance: float) -> str:
    if head_variance < MOVEMENT_STABLE_BELOW:
        return 'stable'
    if head_variance < MOVEMENT_MODERATE_BELOW:
        return 'moderate'
    return 'excessive'


def analyze_attention(head_variance: float, gaze_drift: float) -> AttentionMetrics:
    return AttentionMetrics(
        head_variance=head_variance,
        gaze_drift=gaze_drift,
        attention_score=calculate_attention_score(head_variance, gaze_drift),
        movement_rating=rate_movement(head_variance),
    )


def get_attention_suggestions(metrics: AttentionMetrics) -> List[str]:
    suggestions = []

    if metrics.attention_score >= 80:
        suggestions.append('Excellent attention and stability! You maintained great eye contact.')
    elif metrics.attention_score >= 60:
        suggestions.append('Good attention overall. Try to minimize head movement for even better stability.')
    else:
        suggestions.append(
            'Work on maintaining a stable head position and consistent eye contact with the camera.'
        )

    if metrics.movement_rating == 'excessive':
        suggestions.append(
            'You moved your head quite a bit. Practice keeping a more stable, centered position.'
        )

    if metrics.gaze_drift > 30:
        suggestions.append(
            'Your gaze wandered. Focus on looking directly at the camera to simulate eye contact.'
        )

    return suggestions
