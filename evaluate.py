#!/usr/bin/env python3
"""
Evaluate CLI - grade a recorded mock interview session

Reads a session JSON file (role + answers), grades every answer and the
session as a whole, and writes an evaluation JSON plus a markdown report.
Relevance is scored locally unless a remote backend is selected.

Usage:
    python evaluate.py --session sessions/alex_backend.json
    python evaluate.py --session sessions/alex_backend.json --remote http
    python evaluate.py --session sessions/alex_backend.json --remote claude --csv

Session file:
    {
      "candidate_name": "Alex",
      "role": "backend_node",
      "answers": [
        {"question_id": "bn1", "transcript": "...", "duration_seconds": 95,
         "head_variance": 4.0, "gaze_drift": 10.0},
        {"question_id": "bn2", "status": "skipped"}
      ]
    }

Output:
    outputs/evaluations/{candidate}_evaluation.json
    outputs/reports/{candidate}_report.md
    outputs/reports/{candidate}_questions.csv   (with --csv)
"""

import argparse
import json
import sys
from pathlib import Path

from interview_grader import InterviewSession, UnsupportedRoleError, list_roles
from interview_grader.config import DEFAULT_QUESTION_SECONDS, REMOTE_BACKENDS, load_remote_settings
from interview_grader.evaluators import export_questions_csv, generate_session_report
from interview_grader.lexicon import Question, get_question
from interview_grader.utils import setup_logging


def resolve_question(role: str, answer: dict, number: int) -> Question:
    """Question from the bank by id, or the inline question text"""
    question_id = answer.get('question_id')
    text = answer.get('question')
    if question_id and not text:
        return get_question(role, question_id)
    if not text:
        raise ValueError(f"Answer {number} needs a 'question' or a known 'question_id'")
    return Question(id=question_id or f"q{number}", text=text)


def answer_duration(answer: dict) -> float:
    """Recorded duration, or the full question time when none was recorded"""
    duration = answer.get('duration_seconds')
    return DEFAULT_QUESTION_SECONDS if duration is None else duration


def main():
    parser = argparse.ArgumentParser(
        description='Grade a mock interview session',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Available roles: {', '.join(list_roles())}

Examples:
    # Local scoring only
    python evaluate.py --session sessions/alex_backend.json

    # Use the HTTP scoring service (INTERVIEW_GRADER_API_URL)
    python evaluate.py --session sessions/alex_backend.json --remote http

    # Use Claude for relevance (ANTHROPIC_API_KEY)
    python evaluate.py --session sessions/alex_backend.json --remote claude

    # Also export per-question CSV, with debug logging to a file
    python evaluate.py --session sessions/alex_backend.json --csv --log-file grader.log
        """
    )

    parser.add_argument(
        '--session',
        required=True,
        help='Path to session JSON file'
    )
    parser.add_argument(
        '--remote',
        choices=REMOTE_BACKENDS,
        help='Remote relevance backend (default: INTERVIEW_GRADER_BACKEND or none)'
    )
    parser.add_argument(
        '--output',
        default='./outputs',
        help='Output directory base (default: ./outputs)'
    )
    parser.add_argument(
        '--csv',
        action='store_true',
        help='Also write a per-question CSV export'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Console log level (default: WARNING)'
    )
    parser.add_argument(
        '--log-file',
        help='Write DEBUG logs to this file'
    )

    args = parser.parse_args()
    setup_logging(args.log_level, args.log_file)

    # Validate session path
    session_path = Path(args.session)
    if not session_path.exists():
        print(f"ERROR: Session file not found: {session_path}")
        sys.exit(1)

    # Load session
    print(f"\n{'='*60}")
    print("LOADING SESSION")
    print(f"{'='*60}")

    with open(session_path, 'r') as f:
        session_data = json.load(f)

    candidate_name = session_data.get('candidate_name', 'Candidate')
    role = session_data.get('role', '')
    answers = session_data.get('answers', [])

    try:
        settings = load_remote_settings(args.remote)
        session = InterviewSession(role, settings=settings, max_questions=max(len(answers), 1))
    except (UnsupportedRoleError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)

    print(f"Candidate: {candidate_name}")
    print(f"Role: {session.role.label}")
    print(f"Answers: {len(answers)}")

    # Grade answers
    print(f"\n{'='*60}")
    print("GRADING")
    if settings.enabled:
        print(f"  Using remote relevance scoring ({settings.backend}) with local fallback")
    else:
        print("  Using local relevance scoring")
    print(f"{'='*60}")

    for number, answer in enumerate(answers, start=1):
        try:
            question = resolve_question(session.role, answer, number)
        except (KeyError, ValueError) as e:
            print(f"ERROR: {e}")
            sys.exit(1)

        session.begin_question(question)
        status = answer.get('status', 'answered')
        if status == 'skipped':
            evaluation = session.skip_question()
        else:
            session.record(answer.get('transcript', ''))
            evaluation = session.finalize_answer(
                duration_seconds=answer_duration(answer),
                head_variance=answer.get('head_variance', 0),
                gaze_drift=answer.get('gaze_drift', 0),
                status=status,
            )

        result = evaluation.question_result
        print(f"\n  Q{number} [{result.question_id}] {result.status}: "
              f"{result.overall_score}/100 (Grade {result.grade})")
        if not result.is_skipped:
            print(f"    Pace: {result.text_metrics.wpm} wpm ({result.text_metrics.pace_rating})")
            print(f"    Relevance: {result.relevance.score} ({result.relevance.verdict})")
            print(f"    Attention: {result.attention.attention_score}")

    session_result = session.end()
    overall = session_result.overall

    print(f"\n✓ Grading complete")
    print(f"  Overall: {overall.score}/100 (Grade {overall.grade})")
    for line in overall.summary:
        print(f"  - {line}")

    # Save evaluation
    output_base = Path(args.output)
    eval_dir = output_base / "evaluations"
    report_dir = output_base / "reports"
    eval_dir.mkdir(parents=True, exist_ok=True)
    report_dir.mkdir(parents=True, exist_ok=True)

    safe_name = candidate_name.replace(' ', '_')

    eval_path = eval_dir / f"{safe_name}_evaluation.json"
    eval_data = {
        'candidate': candidate_name,
        'remote_backend': settings.backend,
        'session': session_result.to_dict(),
        'history': [
            {'id': h.question_id, 'question': h.question, 'transcript': h.transcript, 'status': h.status}
            for h in session.history
        ],
    }
    with open(eval_path, 'w') as f:
        json.dump(eval_data, f, indent=2)

    report_path = report_dir / f"{safe_name}_report.md"
    with open(report_path, 'w') as f:
        f.write(generate_session_report(session_result, candidate_name))

    csv_path = None
    if args.csv:
        csv_path = report_dir / f"{safe_name}_questions.csv"
        with open(csv_path, 'w', newline='') as f:
            f.write(export_questions_csv(session_result))

    # Summary
    print(f"\n{'='*60}")
    print("EVALUATION COMPLETE")
    print(f"{'='*60}")
    print(f"Evaluation: {eval_path}")
    print(f"Report: {report_path}")
    if csv_path:
        print(f"CSV: {csv_path}")


if __name__ == "__main__":
    main()
