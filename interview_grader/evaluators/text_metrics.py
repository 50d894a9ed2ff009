"""
Text Metrics - speaking pace and filler words

Counts words, detects fillers with whole-word matching, derives
words-per-minute and a pace rating.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..config import PACE_SLOW_BELOW, PACE_FAST_ABOVE
from ..lexicon import FILLER_WORDS
from ..utils import normalize, count_phrase, round_half_up


@dataclass(frozen=True)
class TextMetrics:
    """Speaking metrics for one transcript"""
    word_count: int
    wpm: int
    filler_count: int
    filler_rate: float  # fillers per minute
    pace_rating: str    # "slow", "good", "fast"
    filler_words: Tuple[Tuple[str, int], ...] = ()

    def to_dict(self) -> Dict:
        return {
            'wordCount': self.word_count,
            'wpm': self.wpm,
            'fillerCount': self.filler_count,
            'fillerRate': self.filler_rate,
            'paceRating': self.pace_rating,
            'fillerWordBreakdown': [
                {'word': word, 'count': count} for word, count in self.filler_words
            ],
        }


def count_words(text: str) -> int:
    """Count whitespace-delimited tokens"""
    return len((text or '').split())


def count_filler_words(text: str) -> Dict[str, int]:
    """
    Count each filler word/phrase in the transcript.

    Only fillers that occur are returned, in vocabulary order.
    """
    text_lower = normalize(text)
    counts = {}
    for filler in FILLER_WORDS:
        n = count_phrase(text_lower, filler)
        if n > 0:
            counts[filler] = n
    return counts


def calculate_wpm(word_count: int, duration_seconds: float) -> int:
    if duration_seconds <= 0:
        return 0
    return round_half_up(word_count / (duration_seconds / 60))


def rate_pace(wpm: float) -> str:
    """Target range is 110-150 wpm, both ends inclusive"""
    if wpm < PACE_SLOW_BELOW:
        return 'slow'
    if wpm > PACE_FAST_ABOVE:
        return 'fast'
    return 'good'


def analyze_text(transcript: str, duration_seconds: float) -> TextMetrics:
    """Analyze a transcript for speaking metrics"""
    word_count = count_words(transcript)
    wpm = calculate_wpm(word_count, duration_seconds)
    filler_map = count_filler_words(transcript)

    filler_count = sum(filler_map.values())
    filler_rate = filler_count / (duration_seconds / 60) if duration_seconds > 0 else 0.0

    # sorted() is stable: ties keep vocabulary order
    filler_words = tuple(sorted(filler_map.items(), key=lambda item: -item[1]))

    return TextMetrics(
        word_count=word_count,
        wpm=wpm,
        filler_count=filler_count,
        filler_rate=filler_rate,
        pace_rating=rate_pace(wpm),
        filler_words=filler_words,
    )


def get_text_suggestions(metrics: TextMetrics) -> List[str]:
    """Pace, filler and length advice for one answer"""
    suggestions = []

    if metrics.pace_rating == 'slow':
        suggestions.append('Try speaking a bit faster. Aim for 110-150 words per minute.')
    elif metrics.pace_rating == 'fast':
        suggestions.append('Slow down slightly. You may be rushing. Aim for 110-150 wpm.')

    if metrics.filler_rate > 5:
        suggestions.append(
            f"Reduce filler words ({metrics.filler_count} detected). Pause instead of using fillers."
        )
    elif metrics.filler_rate > 2:
        suggestions.append('Good job keeping filler words low. Try to eliminate a few more.')

    if metrics.word_count < 50:
        suggestions.append('Your answer was quite brief. Try to provide more detail and examples.')

    return suggestions
