"""
Text normalization, tokenization and phrase matching.

Phrase matching uses word-boundary semantics: a match may not be
preceded or followed by a word character ('umbrella' never matches 'um').
"""

import re
from functools import lru_cache
from typing import Iterable, List

_APOSTROPHES = str.maketrans({'’': "'", '‘': "'", 'ʼ': "'"})
_NON_WORD = re.compile(r"[^\w\s]")


def normalize(text: str) -> str:
    """Lowercase and unify curly apostrophes"""
    return (text or '').translate(_APOSTROPHES).lower()


@lru_cache(maxsize=None)
def phrase_pattern(phrase: str) -> 're.Pattern':
    words = phrase.lower().split()
    body = r'\s+'.join(re.escape(w) for w in words)
    # boundaries only apply next to word characters ('40%' still matches '%')
    left = r'(?<!\w)' if re.match(r'\w', words[0]) else ''
    right = r'(?!\w)' if re.search(r'\w$', words[-1]) else ''
    return re.compile(left + body + right)


def count_phrase(text_lower: str, phrase: str) -> int:
    """Count whole-word occurrences of a phrase in already-normalized text"""
    return len(phrase_pattern(phrase).findall(text_lower))


def contains_phrase(text_lower: str, phrase: str) -> bool:
    return phrase_pattern(phrase).search(text_lower) is not None


def word_tokens(text: str) -> List[str]:
    """All lowercase word tokens with punctuation stripped"""
    return _NON_WORD.sub(' ', normalize(text)).split()


def meaningful_tokens(text: str, stopwords: Iterable[str]) -> List[str]:
    """Word tokens longer than two characters that are not stopwords"""
    stopwords = frozenset(stopwords)
    return [t for t in word_tokens(text) if len(t) > 2 and t not in stopwords]


def stem(token: str) -> str:
    """
    Strip one common suffix (ing / ed / s).

    Length guards keep short words like 'ring', 'red' or 'bus' intact.
    """
    if token.endswith('ing') and len(token) > 5:
        return token[:-3]
    if token.endswith('ed') and len(token) > 4:
        return token[:-2]
    if token.endswith('s') and not token.endswith('ss') and len(token) > 3:
        return token[:-1]
    return token


def split_sentences(text: str) -> List[str]:
    return [s.strip() for s in re.split(r'[.!?]+', text or '') if s.strip()]
