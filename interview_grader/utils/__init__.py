"""
Shared helpers: numeric rounding/clamping, text matching and logging setup.
"""

from .numeric import round_half_up, clamp, map_range, mean
from .text import (
    normalize, count_phrase, contains_phrase, word_tokens,
    meaningful_tokens, stem, split_sentences,
)
from .logging import setup_logging

__all__ = [
    'round_half_up', 'clamp', 'map_range', 'mean',
    'normalize', 'count_phrase', 'contains_phrase', 'word_tokens',
    'meaningful_tokens', 'stem', 'split_sentences',
    'setup_logging',
]
