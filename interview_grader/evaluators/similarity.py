"""
Lexical Similarity - overlap ratios between two free-text strings

Approximates "semantic" similarity with three lexical signals, each 0-100:
- token_set_ratio: Jaccard similarity of meaningful token sets
- bigram_ratio: Jaccard similarity of adjacent token pairs
- partial_ratio: share of the smaller token set that overlaps the other
  by substring (e.g. 'limit' / 'limiter')
"""

from typing import Iterable, List, Sequence, Set, Tuple

from ..config import SIMILARITY_WEIGHTS
from ..lexicon import STOPWORDS
from ..utils import meaningful_tokens

MIN_PARTIAL_LENGTH = 4


def tokenize(text: str) -> List[str]:
    return meaningful_tokens(text, STOPWORDS)


def _jaccard(a: Set, b: Set) -> float:
    if not a or not b:
        return 0.0
    return len(a & b) / len(a | b) * 100


def bigrams(tokens: Sequence[str]) -> Set[Tuple[str, str]]:
    return set(zip(tokens, tokens[1:]))


def token_set_ratio(a_tokens: Iterable[str], b_tokens: Iterable[str]) -> float:
    return _jaccard(set(a_tokens), set(b_tokens))


def bigram_ratio(a_tokens: Sequence[str], b_tokens: Sequence[str]) -> float:
    return _jaccard(bigrams(a_tokens), bigrams(b_tokens))


def _partially_matches(token: str, others: Set[str]) -> bool:
    if token in others:
        return True
    if len(token) < MIN_PARTIAL_LENGTH:
        return False
    return any(
        len(other) >= MIN_PARTIAL_LENGTH and (token in other or other in token)
        for other in others
    )


def partial_ratio(a_tokens: Iterable[str], b_tokens: Iterable[str]) -> float:
    a, b = set(a_tokens), set(b_tokens)
    if not a or not b:
        return 0.0
    smaller, larger = (a, b) if len(a) <= len(b) else (b, a)
    hits = sum(1 for token in smaller if _partially_matches(token, larger))
    return hits / len(smaller) * 100


def lexical_similarity(text_a: str, text_b: str) -> float:
    """Weighted similarity (0-100) between two texts"""
    a_tokens, b_tokens = tokenize(text_a), tokenize(text_b)
    return (
        SIMILARITY_WEIGHTS['token_set'] * token_set_ratio(a_tokens, b_tokens)
        + SIMILARITY_WEIGHTS['bigram'] * bigram_ratio(a_tokens, b_tokens)
        + SIMILARITY_WEIGHTS['partial'] * partial_ratio(a_tokens, b_tokens)
    )
