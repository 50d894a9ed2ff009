"""
Remote Relevance Scoring (optional enhancement)

Two remote backends return the same JSON shape:
- http:   POST {api_url}/api/score with {transcript, role, skill, question}
- claude: Anthropic Claude judges relevance from a condensed rubric prompt

Any failure (network error, timeout, HTTP 4xx/5xx, malformed JSON, missing
API key) falls back to the local heuristic in relevance.py. Nothing here
raises to the caller of score_relevance().
"""

import json
import logging
from dataclasses import replace
from typing import Dict, Optional

import requests
from anthropic import Anthropic

from ..config import MAX_KEYWORDS_REPORTED, RemoteSettings, load_remote_settings
from ..utils import clamp, round_half_up
from .relevance import (
    RelevanceInput, RelevanceResult, score_relevance_local, verdict_for, MODERATE_REASON,
)

logger = logging.getLogger(__name__)

FALLBACK_REASON = 'Could not reach enhanced scoring, using local estimate.'


class RemoteScoringError(RuntimeError):
    """The remote scorer failed or answered with something unusable."""


RELEVANCE_PROMPT = """
You are grading whether a mock interview answer addresses the question asked.

## Role
{role}

## Question
{question}

## Candidate Answer (speech transcript)
{transcript}

---

Score relevance from 0 to 100:
- 60-100: the answer addresses the question with role-appropriate concepts
- 40-59: partially addresses it, generic or missing key concepts
- 0-39: off topic, a non-answer, or "I don't know"

Respond with ONLY valid JSON (no markdown, no explanation):

{{
  "score": <int 0-100>,
  "reasons": ["<short reason>", "<short reason>"],
  "matchedKeywords": ["<technical term the answer used>"],
  "missingKeywords": ["<technical term the answer should have used>"]
}}
"""


# ==================== RESPONSE PARSING ====================

def parse_remote_payload(data: Dict) -> RelevanceResult:
    """
    Map a remote JSON payload onto RelevanceResult.

    Accepts `score` or `overall`, and `reasons` or `suggestions`. The verdict
    is always recomputed from the score.
    """
    if not isinstance(data, dict):
        raise RemoteScoringError(f"Expected a JSON object, got {type(data).__name__}")

    raw_score = data.get('score', data.get('overall'))
    if isinstance(raw_score, bool) or not isinstance(raw_score, (int, float)):
        raise RemoteScoringError(f"Missing or non-numeric score: {raw_score!r}")
    score = round_half_up(clamp(raw_score, 0, 100))

    reasons = data.get('reasons') or data.get('suggestions') or []
    matched = data.get('matchedKeywords') or []
    missing = data.get('missingKeywords') or []
    for name, value in (('reasons', reasons), ('matchedKeywords', matched), ('missingKeywords', missing)):
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise RemoteScoringError(f"'{name}' must be a list of strings")

    return RelevanceResult(
        score=score,
        verdict=verdict_for(score),
        reasons=tuple(reasons) or (MODERATE_REASON,),
        matched_keywords=tuple(matched[:MAX_KEYWORDS_REPORTED]),
        missing_keywords=tuple(missing[:MAX_KEYWORDS_REPORTED]),
        source='remote',
    )


def _strip_markdown(text: str) -> str:
    # Handle potential ```json wrapping
    text = text.strip()
    if text.startswith('```'):
        text = text.split('```')[1]
        if text.startswith('json'):
            text = text[4:]
    return text.strip()


# ==================== BACKENDS ====================

def score_relevance_with_http(relevance_input: RelevanceInput, settings: RemoteSettings) -> RelevanceResult:
    """Call the HTTP scoring service (raises on any failure)"""
    response = requests.post(
        f"{settings.api_url}/api/score",
        json=relevance_input.to_payload(),
        timeout=settings.timeout,
    )
    if not response.ok:
        raise RemoteScoringError(f"API returned {response.status_code}")
    try:
        data = response.json()
    except ValueError as e:
        raise RemoteScoringError(f"Failed to parse API response as JSON: {e}")
    return parse_remote_payload(data)


def score_relevance_with_claude(relevance_input: RelevanceInput, settings: RemoteSettings) -> RelevanceResult:
    """Ask Claude to judge relevance (raises on any failure)"""
    if not settings.api_key:
        raise RemoteScoringError("ANTHROPIC_API_KEY not set")

    payload = relevance_input.to_payload()
    client = Anthropic(api_key=settings.api_key, timeout=settings.timeout)
    prompt = RELEVANCE_PROMPT.format(
        role=payload['role'],
        question=payload['question'],
        transcript=payload['transcript'] or '(no answer)',
    )

    response = client.messages.create(
        model=settings.model,
        max_tokens=600,
        messages=[{"role": "user", "content": prompt}],
    )
    response_text = _strip_markdown(response.content[0].text)

    try:
        data = json.loads(response_text)
    except json.JSONDecodeError as e:
        raise RemoteScoringError(
            f"Failed to parse API response as JSON: {e}\nResponse: {response_text[:500]}"
        )
    return parse_remote_payload(data)


BACKENDS = {
    'http': score_relevance_with_http,
    'claude': score_relevance_with_claude,
}


# ==================== FALLBACK ====================

def fetch_remote_relevance(
    relevance_input: RelevanceInput,
    settings: RemoteSettings
) -> Optional[RelevanceResult]:
    """
    Try the configured remote backend once.

    Returns None when remote scoring is disabled or fails for any reason.
    """
    backend = BACKENDS.get(settings.backend)
    if backend is None:
        return None
    try:
        result = backend(relevance_input, settings)
    except Exception as e:
        logger.warning("Remote relevance scoring (%s) failed: %s", settings.backend, e)
        return None
    logger.info("Remote relevance (%s): %s (%s)", settings.backend, result.score, result.verdict)
    return result


def score_relevance(
    relevance_input: RelevanceInput,
    settings: Optional[RemoteSettings] = None
) -> RelevanceResult:
    """
    Score relevance remotely when configured, otherwise (or on failure) locally.
    """
    settings = settings or load_remote_settings()
    if not settings.enabled:
        return score_relevance_local(relevance_input)

    remote = fetch_remote_relevance(relevance_input, settings)
    if remote is not None:
        return remote

    local = score_relevance_local(relevance_input)
    return replace(local, reasons=local.reasons + (FALLBACK_REASON,))
