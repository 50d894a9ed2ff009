"""
Session Feedback Generation

- Five-sentence session summary (one sentence per aggregate check)
- Markdown session report
- CSV export of per-question rows
"""

import csv
import io
from typing import List

from ..config import (
    SUMMARY_STRONG_COMPOSITE, SUMMARY_RELEVANCE_BELOW, SUMMARY_STAR_BELOW,
    SUMMARY_ATTENTION_BELOW, SUMMARY_FILLERS_ABOVE,
)
from ..lexicon import get_lexicon
from .results import SessionAggregates, SessionResult


def build_session_summary(composite: int, aggregates: SessionAggregates) -> List[str]:
    """Exactly one of two fixed sentences per check, always five in total"""
    return [
        'Strong overall performance.'
        if composite >= SUMMARY_STRONG_COMPOSITE
        else 'Needs improvement overall.',

        'Work on staying on-topic to the prompt.'
        if aggregates.avg_relevance < SUMMARY_RELEVANCE_BELOW
        else 'On-topic content was solid.',

        'Improve STAR completeness (especially Task and Result).'
        if aggregates.star_mean < SUMMARY_STAR_BELOW
        else 'STAR structure was generally complete.',

        'Increase head and eye stability.'
        if aggregates.avg_attention < SUMMARY_ATTENTION_BELOW
        else 'Attention was acceptable.',

        'Reduce filler words.'
        if aggregates.filler_per_min > SUMMARY_FILLERS_ABOVE
        else 'Filler words were under control.',
    ]


def generate_session_report(session: SessionResult, candidate_name: str = "Candidate") -> str:
    """
    Generate a markdown report for a session.

    Works for unfinished sessions too; the overall section is then omitted.
    """
    role_label = get_lexicon(session.role).label

    report = f"# Mock Interview Report: {candidate_name}\n\n"
    report += f"**Role:** {role_label}  \n"
    report += f"**Started:** {session.started_at}  \n"
    report += f"**Ended:** {session.ended_at or 'in progress'}\n\n"

    if session.overall:
        overall = session.overall
        agg = overall.aggregates
        report += "---\n\n"
        report += f"## Overall: {overall.score}/100 (Grade {overall.grade})\n\n"
        for line in overall.summary:
            report += f"- {line}\n"
        report += "\n"
        report += "| Metric | Value |\n"
        report += "|--------|-------|\n"
        report += f"| Average pace | {agg.avg_wpm} wpm |\n"
        report += f"| Average relevance | {agg.avg_relevance}/100 |\n"
        report += f"| STAR mean | {agg.star_mean}/100 |\n"
        report += f"| Average attention | {agg.avg_attention}/100 |\n"
        report += f"| Fillers per minute | {agg.filler_per_min} |\n"
        report += f"| Answered / skipped | {agg.answered_count} / {agg.skipped_count} |\n\n"

    for number, q in enumerate(session.questions, start=1):
        report += "---\n\n"
        report += f"## Q{number}: {q.question}\n\n"
        report += f"**Status:** {q.status}  \n"
        report += f"**Score:** {q.overall_score if q.overall_score is not None else '-'}/100 "
        report += f"(Grade {q.grade or '-'})\n\n"

        if q.is_skipped:
            continue

        if q.text_metrics:
            tm = q.text_metrics
            report += f"- Pace: {tm.wpm} wpm ({tm.pace_rating})\n"
            report += f"- Fillers: {tm.filler_count} ({tm.filler_rate:.1f}/min)\n"
        if q.star_scores:
            s = q.star_scores
            report += f"- STAR: S {s.S} / T {s.T} / A {s.A} / R {s.R}\n"
        if q.attention:
            report += f"- Attention: {q.attention.attention_score}/100 ({q.attention.movement_rating})\n"
        if q.relevance:
            rel = q.relevance
            report += f"- Relevance: {rel.score}/100 ({rel.verdict.replace('_', ' ')})\n"
            for reason in rel.reasons:
                report += f"  - {reason}\n"
        report += "\n"

    report += "---\n\n"
    report += "*Score Formula: 0.35 × Relevance + 0.35 × STAR + 0.15 × Attention + 0.10 × Pace + 0.05 × Fillers*\n"
    return report


CSV_COLUMNS = [
    'id', 'question', 'status', 'overall_score', 'grade', 'wpm', 'filler_count',
    'attention_score', 'S', 'T', 'A', 'R', 'relevance_score', 'relevance_verdict',
]


def export_questions_csv(session: SessionResult) -> str:
    """One CSV row per question (empty cells where a metric is absent)"""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=CSV_COLUMNS, lineterminator='\n')
    writer.writeheader()

    for q in session.questions:
        row = {
            'id': q.question_id,
            'question': q.question,
            'status': q.status,
            'overall_score': q.overall_score,
            'grade': q.grade,
        }
        if q.text_metrics:
            row['wpm'] = q.text_metrics.wpm
            row['filler_count'] = q.text_metrics.filler_count
        if q.attention:
            row['attention_score'] = q.attention.attention_score
        if q.star_scores:
            row.update(q.star_scores.to_dict())
        if q.relevance:
            row['relevance_score'] = q.relevance.score
            row['relevance_verdict'] = q.relevance.verdict
        writer.writerow(row)

    return buffer.getvalue()
