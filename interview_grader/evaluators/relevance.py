"""
Relevance Scoring - is the answer about the question that was asked?

Local, deterministic heuristic combining:
- lexical similarity between answer and question
- keyword coverage (question keywords + top role keywords, with stemming
  and synonym groups)
- STAR rubric bonus and high-rubric boost
- off-topic and vagueness penalties

The verdict is derived from the score alone (>= 60 on topic, >= 40
partially on topic, otherwise off topic).
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from ..config import (
    MIN_MEANINGFUL_TOKENS, SHORT_ANSWER_SCORE, TOP_ROLE_KEYWORDS,
    MAX_KEYWORDS_REPORTED, RELEVANCE_WEIGHTS,
    RUBRIC_BONUS_PER_COMPONENT, RUBRIC_BONUS_THRESHOLD, RUBRIC_BONUS_CAP,
    HIGH_RUBRIC_THRESHOLD, HIGH_RUBRIC_BOOSTS, TWO_HIGH_MIN_MEAN, HIGH_MEAN_MIN,
    OFF_TOPIC_PENALTY_PER_MARKER, OFF_TOPIC_PENALTY_CAP,
    VAGUE_SCALE_FACTOR, VAGUE_PENALTY_CAP,
    KEYWORD_BOOST, KEYWORD_BOOST_MIN_COVERAGE,
    ON_TOPIC_MIN, PARTIAL_MIN,
)
from ..lexicon import (
    Lexicon, RoleSkill, get_lexicon, STOPWORDS,
    OFF_TOPIC_PHRASES, UNRELATED_TOPICS, VAGUE_PHRASES,
)
from ..utils import (
    normalize, count_phrase, contains_phrase, word_tokens,
    stem, clamp, round_half_up,
)
from .similarity import lexical_similarity, tokenize
from .star_components import StarScores, analyze_star

logger = logging.getLogger(__name__)

VERDICTS = ('on_topic', 'partially_on_topic', 'off_topic')

NO_ANSWER_REASON = 'No answer was given.'
TOO_SHORT_REASON = (
    'Answer is too short to judge relevance. Give a complete answer with specific details.'
)
MODERATE_REASON = 'Answer shows moderate relevance. Consider adding more specific details.'


@dataclass(frozen=True)
class RelevanceInput:
    """Everything the relevance scorer needs for one answer"""
    transcript: str
    role: Union[str, RoleSkill]
    question: str
    skill: Optional[str] = None

    def to_payload(self) -> Dict[str, str]:
        role = get_lexicon(self.role).role.value
        return {
            'transcript': self.transcript,
            'role': role,
            'skill': self.skill or role,
            'question': self.question,
        }


@dataclass(frozen=True)
class RelevanceResult:
    """Relevance score, verdict and the reasons behind them"""
    score: int
    verdict: str
    reasons: Tuple[str, ...]
    matched_keywords: Tuple[str, ...] = ()
    missing_keywords: Tuple[str, ...] = ()
    source: str = 'local'  # "local" or "remote"

    def to_dict(self) -> Dict:
        return {
            'score': self.score,
            'verdict': self.verdict,
            'reasons': list(self.reasons),
            'matchedKeywords': list(self.matched_keywords),
            'missingKeywords': list(self.missing_keywords),
            'source': self.source,
        }


@dataclass(frozen=True)
class KeywordCoverage:
    matched: Tuple[str, ...]
    missing: Tuple[str, ...]
    score: int


def verdict_for(score: float) -> str:
    """Fixed thresholds: >= 60 on_topic, >= 40 partially_on_topic, else off_topic"""
    if score >= ON_TOPIC_MIN:
        return 'on_topic'
    if score >= PARTIAL_MIN:
        return 'partially_on_topic'
    return 'off_topic'


# ==================== KEYWORDS ====================

def extract_question_keywords(question: str) -> List[str]:
    """Distinct non-stopword question words longer than three characters"""
    seen = []
    for token in word_tokens(question):
        if len(token) > 3 and token not in STOPWORDS and token not in seen:
            seen.append(token)
    return seen


def build_required_keywords(question: str, lexicon: Lexicon) -> List[str]:
    """Question keywords followed by the top role keywords, deduplicated"""
    required = []
    for keyword in extract_question_keywords(question) + list(lexicon.top_keywords(TOP_ROLE_KEYWORDS)):
        if keyword not in required:
            required.append(keyword)
    return required


def _token_present(token: str, tokens: Set[str], stems: Set[str]) -> bool:
    return token in tokens or stem(token) in stems


def _synonyms(token: str, lexicon: Lexicon) -> List[str]:
    forms = {token, stem(token)}
    alternatives = []
    for group in lexicon.synonym_groups:
        if any(term in forms or stem(term) in forms for term in group):
            alternatives.extend(term for term in group if term not in alternatives)
    return alternatives


def keyword_matches(keyword: str, tokens: Set[str], stems: Set[str], lexicon: Lexicon) -> bool:
    """
    True when every token of the keyword appears in the answer verbatim,
    after stemming, or through one of the role's synonym groups.
    """
    for part in keyword.lower().split():
        if _token_present(part, tokens, stems):
            continue
        if any(
            all(_token_present(t, tokens, stems) for t in alt.split())
            for alt in _synonyms(part, lexicon)
        ):
            continue
        return False
    return True


def calculate_keyword_coverage(
    transcript: str,
    keywords: Sequence[str],
    lexicon: Lexicon
) -> KeywordCoverage:
    tokens = set(word_tokens(transcript))
    stems = {stem(t) for t in tokens}

    matched, missing = [], []
    for keyword in keywords:
        if keyword_matches(keyword, tokens, stems, lexicon):
            matched.append(keyword)
        else:
            missing.append(keyword)

    score = round_half_up(len(matched) / len(keywords) * 100) if keywords else 0
    return KeywordCoverage(matched=tuple(matched), missing=tuple(missing), score=score)


# ==================== RUBRIC ====================

def calculate_rubric_bonus(scores: StarScores) -> int:
    """+5 for each of Task, Action, Result above 50, capped at 15"""
    strong = sum(1 for s in (scores.T, scores.A, scores.R) if s > RUBRIC_BONUS_THRESHOLD)
    return min(strong * RUBRIC_BONUS_PER_COMPONENT, RUBRIC_BONUS_CAP)


def calculate_high_rubric_boost(scores: StarScores) -> int:
    """Highest satisfied tier only"""
    high = sum(1 for s in scores.values() if s >= HIGH_RUBRIC_THRESHOLD)
    if high >= 3:
        return HIGH_RUBRIC_BOOSTS['three_high']
    if high == 2 and scores.mean >= TWO_HIGH_MIN_MEAN:
        return HIGH_RUBRIC_BOOSTS['two_high']
    if scores.mean >= HIGH_MEAN_MIN:
        return HIGH_RUBRIC_BOOSTS['high_mean']
    return 0


# ==================== PENALTIES ====================

def detect_off_topic_markers(transcript: str) -> List[str]:
    """Non-answer phrases and unrelated topics found in the transcript"""
    text_lower = normalize(transcript)
    return [
        marker for marker in OFF_TOPIC_PHRASES + UNRELATED_TOPICS
        if contains_phrase(text_lower, marker)
    ]


def calculate_vagueness(transcript: str) -> float:
    """Fraction (0-1) of the words that belong to vague phrases"""
    word_count = len(transcript.split())
    if word_count == 0:
        return 0.0
    text_lower = normalize(transcript)
    vague_words = sum(
        count_phrase(text_lower, phrase) * len(phrase.split()) for phrase in VAGUE_PHRASES
    )
    return min(vague_words / word_count, 1.0)


def off_topic_penalty(markers: Sequence[str]) -> int:
    return min(len(markers) * OFF_TOPIC_PENALTY_PER_MARKER, OFF_TOPIC_PENALTY_CAP)


def vague_penalty(vague_ratio: float) -> int:
    return min(round_half_up(vague_ratio * VAGUE_SCALE_FACTOR), VAGUE_PENALTY_CAP)


# ==================== SCORING ====================

def score_relevance_local(relevance_input: RelevanceInput) -> RelevanceResult:
    """Score answer relevance using local heuristics"""
    lexicon = get_lexicon(relevance_input.role)
    transcript = relevance_input.transcript or ''
    required = build_required_keywords(relevance_input.question, lexicon)

    # Empty answers are scored as off topic
    if not transcript.strip():
        return RelevanceResult(
            score=0,
            verdict='off_topic',
            reasons=(NO_ANSWER_REASON,),
            missing_keywords=tuple(required[:MAX_KEYWORDS_REPORTED]),
        )

    markers = detect_off_topic_markers(transcript)

    # Length guard: terse answers get a neutral score instead of a reward
    if len(tokenize(transcript)) < MIN_MEANINGFUL_TOKENS:
        reasons = [TOO_SHORT_REASON]
        if markers:
            reasons.append(f'Contains off-topic markers: "{markers[0]}".')
        return RelevanceResult(
            score=SHORT_ANSWER_SCORE,
            verdict=verdict_for(SHORT_ANSWER_SCORE),
            reasons=tuple(reasons),
            missing_keywords=tuple(required[:MAX_KEYWORDS_REPORTED]),
        )

    similarity = round_half_up(lexical_similarity(transcript, relevance_input.question))
    coverage = calculate_keyword_coverage(transcript, required, lexicon)

    star_scores = analyze_star(transcript).scores
    rubric_bonus = calculate_rubric_bonus(star_scores)
    high_boost = calculate_high_rubric_boost(star_scores)

    topic_penalty = off_topic_penalty(markers)
    vagueness = calculate_vagueness(transcript)
    vagueness_penalty = vague_penalty(vagueness)

    keyword_boost = KEYWORD_BOOST if coverage.score >= KEYWORD_BOOST_MIN_COVERAGE else 0

    raw = (
        RELEVANCE_WEIGHTS['similarity'] * similarity
        + RELEVANCE_WEIGHTS['coverage'] * coverage.score
        + rubric_bonus + high_boost + keyword_boost
        - topic_penalty - vagueness_penalty
    )
    score = round_half_up(clamp(raw, 0, 100))
    verdict = verdict_for(score)

    logger.debug(
        "relevance: similarity=%s coverage=%s rubric=%s boost=%s keyword=%s "
        "off_topic=-%s vague=-%s -> %s (%s)",
        similarity, coverage.score, rubric_bonus, high_boost, keyword_boost,
        topic_penalty, vagueness_penalty, score, verdict,
    )

    reasons = _build_reasons(
        lexicon, similarity, coverage, rubric_bonus + high_boost,
        markers, vagueness_penalty, verdict,
    )

    return RelevanceResult(
        score=score,
        verdict=verdict,
        reasons=tuple(reasons),
        matched_keywords=coverage.matched[:MAX_KEYWORDS_REPORTED],
        missing_keywords=coverage.missing[:MAX_KEYWORDS_REPORTED],
    )


def _build_reasons(
    lexicon: Lexicon,
    similarity: int,
    coverage: KeywordCoverage,
    rubric_points: int,
    markers: Sequence[str],
    vagueness_penalty: int,
    verdict: str
) -> List[str]:
    reasons = []

    if similarity < 20:
        reasons.append(
            f"Low overlap with the question wording ({similarity}%). Make sure you answer what was asked."
        )
    if coverage.score < 30:
        reasons.append(f"Low keyword coverage ({coverage.score}%). Answer may not address the question.")
    if len(coverage.missing) > 5:
        reasons.append(f"Missing key {lexicon.label} concepts: {', '.join(coverage.missing[:3])}.")
    if coverage.score >= 70:
        reasons.append(f"Strong keyword coverage ({coverage.score}%). Well-aligned with question.")
    if rubric_points > 0:
        reasons.append(f"Well-structured answer earned a rubric bonus (+{rubric_points}).")
    if markers:
        reasons.append(f'Contains off-topic markers: "{markers[0]}".')
    if vagueness_penalty > 0:
        reasons.append('Answer contains vague phrases. Be more specific.')

    if verdict == 'on_topic':
        reasons.append('Overall, the answer is on topic.')
    elif verdict == 'off_topic':
        reasons.append('Overall, the answer appears to be off topic.')

    if not reasons:
        reasons.append(MODERATE_REASON)
    return reasons
