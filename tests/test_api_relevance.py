"""
Tests for remote relevance scoring and the local fallback

No network access: requests.post and the Anthropic client are patched.
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from interview_grader.config import RemoteSettings, load_remote_settings
from interview_grader.evaluators import RelevanceInput, score_relevance, fetch_remote_relevance
from interview_grader.evaluators.api_relevance import (
    FALLBACK_REASON, RemoteScoringError, parse_remote_payload, _strip_markdown,
)

HTTP_SETTINGS = RemoteSettings(backend='http', api_url='http://grader.test', timeout=2.0)
CLAUDE_SETTINGS = RemoteSettings(backend='claude', api_key='sk-test', timeout=3.0)

ANSWER = RelevanceInput(
    transcript="I built a token bucket rate limiter in Express middleware backed by Redis.",
    role='backend_node',
    question="How do you design a rate limiter for an API?",
)


def http_response(payload=None, status_code=200, json_error=None):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def claude_message(text):
    message = MagicMock()
    message.content = [MagicMock(text=text)]
    return message


class TestParseRemotePayload:
    """Test mapping remote JSON onto RelevanceResult"""

    def test_score_and_reasons(self):
        result = parse_remote_payload({
            'score': 72.4,
            'reasons': ['Mentions token bucket'],
            'matchedKeywords': ['rate limit'],
            'missingKeywords': ['jwt'],
        })
        assert result.score == 72
        assert result.verdict == 'on_topic'
        assert result.reasons == ('Mentions token bucket',)
        assert result.matched_keywords == ('rate limit',)
        assert result.missing_keywords == ('jwt',)
        assert result.source == 'remote'

    def test_overall_and_suggestions_aliases(self):
        result = parse_remote_payload({'overall': 45, 'suggestions': ['Add detail']})
        assert result.score == 45
        assert result.verdict == 'partially_on_topic'
        assert result.reasons == ('Add detail',)

    def test_verdict_is_recomputed(self):
        result = parse_remote_payload({'score': 30, 'verdict': 'on_topic'})
        assert result.verdict == 'off_topic'

    def test_score_is_clamped(self):
        assert parse_remote_payload({'score': 150}).score == 100
        assert parse_remote_payload({'score': -5}).score == 0

    @pytest.mark.parametrize("payload", [
        {},
        {'score': 'high'},
        {'score': True},
        {'score': 80, 'reasons': 'fine'},
        {'score': 80, 'matchedKeywords': [1, 2]},
        ['score', 80],
    ])
    def test_invalid_payloads(self, payload):
        with pytest.raises(RemoteScoringError):
            parse_remote_payload(payload)

    def test_strip_markdown(self):
        assert _strip_markdown('```json\n{"score": 1}\n```') == '{"score": 1}'
        assert _strip_markdown('  {"score": 1} ') == '{"score": 1}'


class TestHttpBackend:
    """Test the HTTP scoring service client"""

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_remote_result_used(self, mock_post):
        mock_post.return_value = http_response({'score': 88, 'reasons': ['Specific and relevant']})

        result = score_relevance(ANSWER, HTTP_SETTINGS)

        assert result.score == 88
        assert result.source == 'remote'
        mock_post.assert_called_once_with(
            'http://grader.test/api/score',
            json={
                'transcript': ANSWER.transcript,
                'role': 'backend_node',
                'skill': 'backend_node',
                'question': ANSWER.question,
            },
            timeout=2.0,
        )

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_connection_error_falls_back(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("refused")

        result = score_relevance(ANSWER, HTTP_SETTINGS)

        assert result.source == 'local'
        assert result.reasons[-1] == FALLBACK_REASON
        assert 0 <= result.score <= 100

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_timeout_falls_back(self, mock_post):
        mock_post.side_effect = requests.Timeout("slow")
        assert score_relevance(ANSWER, HTTP_SETTINGS).reasons[-1] == FALLBACK_REASON

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_server_error_falls_back(self, mock_post):
        mock_post.return_value = http_response(status_code=500)
        result = score_relevance(ANSWER, HTTP_SETTINGS)
        assert result.source == 'local'
        assert result.reasons[-1] == FALLBACK_REASON

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_malformed_json_falls_back(self, mock_post):
        mock_post.return_value = http_response(json_error=ValueError("not json"))
        assert score_relevance(ANSWER, HTTP_SETTINGS).source == 'local'

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_failure_returns_none_from_fetch(self, mock_post):
        mock_post.side_effect = requests.ConnectionError("refused")
        assert fetch_remote_relevance(ANSWER, HTTP_SETTINGS) is None

    @patch('interview_grader.evaluators.api_relevance.requests.post')
    def test_disabled_backend_never_calls_out(self, mock_post):
        result = score_relevance(ANSWER, RemoteSettings())
        mock_post.assert_not_called()
        assert result.source == 'local'
        assert FALLBACK_REASON not in result.reasons


class TestClaudeBackend:
    """Test the Claude relevance judge"""

    @patch('interview_grader.evaluators.api_relevance.Anthropic')
    def test_remote_result_used(self, mock_anthropic):
        client = mock_anthropic.return_value
        client.messages.create.return_value = claude_message(
            '```json\n{"score": 91, "reasons": ["Covers the algorithm"], "matchedKeywords": ["redis"]}\n```'
        )

        result = score_relevance(ANSWER, CLAUDE_SETTINGS)

        assert result.score == 91
        assert result.source == 'remote'
        assert result.matched_keywords == ('redis',)
        mock_anthropic.assert_called_once_with(api_key='sk-test', timeout=3.0)
        prompt = client.messages.create.call_args.kwargs['messages'][0]['content']
        assert ANSWER.question in prompt
        assert ANSWER.transcript in prompt

    @patch('interview_grader.evaluators.api_relevance.Anthropic')
    def test_bad_json_falls_back(self, mock_anthropic):
        mock_anthropic.return_value.messages.create.return_value = claude_message("Looks relevant to me!")
        result = score_relevance(ANSWER, CLAUDE_SETTINGS)
        assert result.source == 'local'
        assert result.reasons[-1] == FALLBACK_REASON

    @patch('interview_grader.evaluators.api_relevance.Anthropic')
    def test_missing_api_key_falls_back(self, mock_anthropic):
        settings = RemoteSettings(backend='claude', api_key=None)
        result = score_relevance(ANSWER, settings)
        mock_anthropic.assert_not_called()
        assert result.reasons[-1] == FALLBACK_REASON

    @patch('interview_grader.evaluators.api_relevance.Anthropic')
    def test_client_error_falls_back(self, mock_anthropic):
        mock_anthropic.return_value.messages.create.side_effect = RuntimeError("overloaded")
        assert score_relevance(ANSWER, CLAUDE_SETTINGS).source == 'local'


class TestRemoteSettings:
    """Test environment configuration"""

    def test_defaults(self, monkeypatch):
        for name in ('INTERVIEW_GRADER_BACKEND', 'INTERVIEW_GRADER_API_URL', 'INTERVIEW_GRADER_TIMEOUT'):
            monkeypatch.delenv(name, raising=False)
        settings = load_remote_settings()
        assert settings.backend == 'none'
        assert not settings.enabled
        assert settings.api_url == 'http://localhost:3001'
        assert settings.timeout == 5.0

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv('INTERVIEW_GRADER_BACKEND', 'HTTP')
        monkeypatch.setenv('INTERVIEW_GRADER_API_URL', 'http://scores.internal:8080/')
        monkeypatch.setenv('INTERVIEW_GRADER_TIMEOUT', '1.5')
        settings = load_remote_settings()
        assert settings.backend == 'http'
        assert settings.enabled
        assert settings.api_url == 'http://scores.internal:8080'
        assert settings.timeout == 1.5

    def test_override_backend(self, monkeypatch):
        monkeypatch.setenv('INTERVIEW_GRADER_BACKEND', 'http')
        assert load_remote_settings('none').backend == 'none'

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.delenv('INTERVIEW_GRADER_BACKEND', raising=False)
        with pytest.raises(ValueError, match="Unknown remote backend"):
            load_remote_settings('carrier-pigeon')

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv('INTERVIEW_GRADER_TIMEOUT', 'soon')
        with pytest.raises(ValueError, match="INTERVIEW_GRADER_TIMEOUT"):
            load_remote_settings('none')
