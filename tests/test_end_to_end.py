"""
End-to-end grading tests

A strong, well-structured backend answer spoken at 130 wpm with a steady
head should grade A or B; the session report and CSV export reflect it.
"""

import csv
import io

import pytest
from interview_grader import AnswerEvaluator, AnswerSnapshot, InterviewSession
from interview_grader.config import RemoteSettings
from interview_grader.evaluators import (
    export_questions_csv, filler_score, generate_session_report,
)
from interview_grader.evaluators.text_metrics import count_words
from interview_grader.lexicon import get_question

STRONG_BACKEND_ANSWER = (
    "At my company our team owned a public REST API in production, and a few heavy "
    "clients were overloading the database. My task was to design a rate limiter for "
    "that API. The main challenge was the deadline of two weeks. First I profiled the "
    "traffic and designed a token bucket limiter as Express middleware. Then I used "
    "Redis to store counters per JWT auth identity. Next I deployed it and tested the "
    "rate limit with a load test. As a result, database errors dropped by 80% and "
    "latency improved. We reduced costs and I learned to describe the implementation clearly."
)

OFF_TOPIC_ANSWER = (
    "I don't know much about that, but last weekend I watched a football game and "
    "then we went to a great restaurant for food with friends and family downtown."
)


def duration_for_wpm(transcript, wpm):
    return count_words(transcript) * 60 / wpm


@pytest.fixture
def evaluator():
    return AnswerEvaluator('backend_node', settings=RemoteSettings())


@pytest.fixture
def rate_limiter():
    return get_question('backend_node', 'bn1')


class TestStrongAnswer:
    """Test the full pipeline on a strong answer"""

    def test_strong_answer_grades_well(self, evaluator, rate_limiter):
        snapshot = AnswerSnapshot(
            transcript=STRONG_BACKEND_ANSWER,
            duration_seconds=duration_for_wpm(STRONG_BACKEND_ANSWER, 130),
            head_variance=5,
            gaze_drift=0,
        )
        evaluation = evaluator.evaluate(snapshot, rate_limiter.text, question_id=rate_limiter.id)
        result = evaluation.question_result

        assert result.text_metrics.pace_rating == 'good'
        assert result.text_metrics.filler_count == 0
        assert filler_score(result.text_metrics.filler_rate) == 100
        assert result.star_scores.mean >= 70
        assert result.relevance.verdict == 'on_topic'
        assert result.overall_score >= 80
        assert result.grade in ('A', 'B')

    def test_grading_is_repeatable(self, evaluator, rate_limiter):
        snapshot = AnswerSnapshot(transcript=STRONG_BACKEND_ANSWER, duration_seconds=60, head_variance=5)
        first = evaluator.evaluate(snapshot, rate_limiter.text).question_result
        second = evaluator.evaluate(snapshot, rate_limiter.text).question_result
        assert (first.overall_score, first.grade) == (second.overall_score, second.grade)
        assert first.to_dict() == second.to_dict()

    def test_off_topic_answer_grades_lower(self, evaluator, rate_limiter):
        strong = evaluator.evaluate(
            AnswerSnapshot(transcript=STRONG_BACKEND_ANSWER, duration_seconds=60), rate_limiter.text,
        ).question_result
        weak = evaluator.evaluate(
            AnswerSnapshot(transcript=OFF_TOPIC_ANSWER, duration_seconds=12), rate_limiter.text,
        ).question_result
        assert weak.relevance.score < strong.relevance.score
        assert weak.overall_score < strong.overall_score
        assert any('off-topic markers' in r for r in weak.relevance.reasons)

    def test_skip_is_zero(self, evaluator, rate_limiter):
        result = evaluator.skip(rate_limiter.text, question_id=rate_limiter.id).question_result
        assert (result.overall_score, result.grade, result.status) == (0, 'F', 'skipped')

    def test_skipped_status_rejected_by_evaluate(self, evaluator, rate_limiter):
        with pytest.raises(ValueError):
            evaluator.evaluate(AnswerSnapshot(transcript='', duration_seconds=0), rate_limiter.text,
                               status='skipped')


class TestSessionOutputs:
    """Test report and CSV export for a finished session"""

    @pytest.fixture
    def finished_session(self, rate_limiter):
        session = InterviewSession('backend_node', settings=RemoteSettings())
        session.begin_question(rate_limiter)
        session.record(STRONG_BACKEND_ANSWER)
        session.finalize_answer(
            duration_seconds=duration_for_wpm(STRONG_BACKEND_ANSWER, 130), head_variance=5,
        )
        session.begin_question(get_question('backend_node', 'bn2'))
        session.skip_question()
        return session.end()

    def test_session_composite_ignores_skipped(self, finished_session):
        answered = finished_session.questions[0]
        assert finished_session.overall.score == answered.overall_score
        assert finished_session.overall.aggregates.skipped_count == 1
        assert finished_session.overall.summary[0] == 'Strong overall performance.'

    def test_markdown_report(self, finished_session):
        report = generate_session_report(finished_session, "Alex")
        assert report.startswith("# Mock Interview Report: Alex")
        assert "**Role:** Node.js Backend" in report
        assert f"## Overall: {finished_session.overall.score}/100" in report
        assert "## Q2:" in report
        assert "**Status:** skipped" in report

    def test_csv_export(self, finished_session):
        rows = list(csv.DictReader(io.StringIO(export_questions_csv(finished_session))))
        assert [r['id'] for r in rows] == ['bn1', 'bn2']
        assert rows[0]['relevance_verdict'] == 'on_topic'
        assert rows[1]['status'] == 'skipped'
        assert rows[1]['overall_score'] == '0'
        assert rows[1]['wpm'] == ''
