"""
STAR Components - detect Situation, Task, Action, Result in an answer

Each component is scored from the number of distinct keyword matches
(0 -> 0, 1 -> 40, 2 -> 70, 3+ -> 100), then every component receives the
same length bonus of two points per sentence (capped at 20).
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config import (
    STAR_MATCH_SCORES, STAR_MAX_SCORE, STAR_SENTENCE_BONUS,
    STAR_LENGTH_BONUS_CAP, STAR_MISSING_BELOW,
)
from ..lexicon import STAR_COMPONENTS, STAR_KEYWORDS, STAR_LABELS, STAR_SUGGESTIONS
from ..utils import normalize, contains_phrase, split_sentences, round_half_up


@dataclass(frozen=True)
class StarScores:
    """Per-component STAR scores (0-100)"""
    S: int = 0
    T: int = 0
    A: int = 0
    R: int = 0

    def values(self) -> Tuple[int, int, int, int]:
        return (self.S, self.T, self.A, self.R)

    @property
    def mean(self) -> float:
        return sum(self.values()) / 4

    def to_dict(self) -> Dict[str, int]:
        return {'S': self.S, 'T': self.T, 'A': self.A, 'R': self.R}


@dataclass(frozen=True)
class StarAnalysis:
    """STAR scores plus the components still missing and what to do about them"""
    scores: StarScores
    missing: Tuple[str, ...]
    suggestions: Tuple[str, ...]
    matches: Dict[str, Tuple[str, ...]]

    @property
    def overall(self) -> int:
        return overall_star_score(self.scores)


def find_component_matches(text_lower: str, component: str) -> Tuple[str, ...]:
    """Distinct STAR keywords of one component present in the text"""
    return tuple(kw for kw in STAR_KEYWORDS[component] if contains_phrase(text_lower, kw))


def score_matches(match_count: int) -> int:
    """Progressive scoring: 1 match = 40, 2 = 70, 3+ = 100"""
    return STAR_MATCH_SCORES.get(match_count, STAR_MAX_SCORE)


def length_bonus(text: str) -> int:
    return min(len(split_sentences(text)) * STAR_SENTENCE_BONUS, STAR_LENGTH_BONUS_CAP)


def detect_star_structure(text: str) -> Tuple[StarScores, Dict[str, Tuple[str, ...]]]:
    """
    Score all four components.

    Returns: (scores, matched keywords per component)
    """
    text_lower = normalize(text)
    bonus = length_bonus(text)

    matches = {}
    scores = {}
    for component in STAR_COMPONENTS:
        matches[component] = find_component_matches(text_lower, component)
        base = score_matches(len(matches[component]))
        scores[component] = min(base + bonus, STAR_MAX_SCORE)

    return StarScores(**scores), matches


def analyze_star(transcript: str) -> StarAnalysis:
    """Analyze a transcript for STAR completeness"""
    scores, matches = detect_star_structure(transcript)
    missing: List[str] = []
    suggestions: List[str] = []

    for component, score in zip(STAR_COMPONENTS, scores.values()):
        if score < STAR_MISSING_BELOW:
            missing.append(STAR_LABELS[component])
            suggestions.append(STAR_SUGGESTIONS[component])

    # Summary line: always present so there is at least one suggestion
    if not missing:
        suggestions.append('Great job covering all STAR components! Keep being specific and detailed.')
    elif len(missing) <= 2:
        suggestions.append(f"Good structure overall. Strengthen the {' and '.join(missing)} sections.")
    else:
        suggestions.append(
            'Use the STAR framework: Situation → Task → Action → Result to structure your answer.'
        )

    return StarAnalysis(
        scores=scores,
        missing=tuple(missing),
        suggestions=tuple(suggestions),
        matches=matches,
    )


def overall_star_score(scores: StarScores) -> int:
    """Overall STAR completeness (0-100)"""
    return round_half_up(scores.mean)
