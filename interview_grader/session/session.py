"""
Interview Session - question sequence for one mock interview

Flow:
    session = InterviewSession('backend_node')
    question = session.begin_question()
    session.record("In my last project we had...")
    session.finalize_answer(duration_seconds=95, head_variance=4, gaze_drift=10)
    ...
    result = session.end()

The session finishes on its own after MAX_QUESTIONS questions; end()
finishes it early. Either way the overall grade is computed exactly once.
"""

import logging
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Union

from ..config import MAX_QUESTIONS, RemoteSettings
from ..evaluators import (
    AnswerEvaluation, AnswerEvaluator, AnswerSnapshot, SessionFinishedError,
    SessionResult, compute_overall,
)
from ..lexicon import Question, RoleSkill, get_random_question, parse_role
from .buffer import TranscriptBuffer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuestionHistory:
    """Question asked and the transcript recorded for it"""
    question_id: str
    question: str
    transcript: str
    status: str


class InterviewSession:
    """
    Drives one interview: ask, record, finalize or skip, and grade at the end.

    At most one answer is in progress at a time.
    """

    def __init__(
        self,
        role: Union[str, RoleSkill],
        settings: Optional[RemoteSettings] = None,
        max_questions: int = MAX_QUESTIONS,
        rng: Optional[random.Random] = None
    ):
        if max_questions < 1:
            raise ValueError(f"max_questions must be >= 1, got {max_questions}")
        self.role = parse_role(role)
        self.evaluator = AnswerEvaluator(self.role, settings)
        self.max_questions = max_questions
        self.rng = rng
        self.result = SessionResult(role=self.role.value)
        self.history: List[QuestionHistory] = []
        self.current_question: Optional[Question] = None
        self._buffer = TranscriptBuffer()

    @property
    def is_finished(self) -> bool:
        return self.result.is_finished

    @property
    def live_transcript(self) -> str:
        return self._buffer.freeze()

    def _ensure_active(self) -> None:
        if self.is_finished:
            raise SessionFinishedError("Session is finished")

    def _require_question(self) -> Question:
        if self.current_question is None:
            raise RuntimeError("No question in progress; call begin_question() first")
        return self.current_question

    def begin_question(self, question: Optional[Question] = None) -> Question:
        """Start the next question (a random unasked one when none is given)"""
        self._ensure_active()
        if self.current_question is not None:
            raise RuntimeError(
                f"Question '{self.current_question.id}' is still in progress; finalize or skip it first"
            )
        if question is None:
            asked = [h.question_id for h in self.history]
            question = get_random_question(self.role, rng=self.rng, exclude=asked)

        self.current_question = question
        self._buffer.reset()
        logger.info("Question %s/%s (%s): %s",
                    len(self.history) + 1, self.max_questions, question.id, question.text)
        return question

    def record(self, chunk: str) -> None:
        """Append recognized speech to the answer in progress"""
        self._ensure_active()
        self._require_question()
        self._buffer.append(chunk)

    def finalize_answer(
        self,
        duration_seconds: float,
        head_variance: float = 0.0,
        gaze_drift: float = 0.0,
        status: str = 'answered'
    ) -> AnswerEvaluation:
        """
        Grade the answer in progress.

        Args:
            duration_seconds: Time spent answering
            head_variance: Averaged head-pose variance (0 = no signal)
            gaze_drift: Averaged gaze drift (0 = no signal)
            status: "answered", or "timeout" when the question timer ran out

        Returns:
            AnswerEvaluation for this question. Its QuestionResult is a copy;
            the finalized record stays in session.result
        """
        self._ensure_active()
        question = self._require_question()

        snapshot = AnswerSnapshot(
            transcript=self._buffer.freeze(),
            duration_seconds=duration_seconds,
            head_variance=head_variance,
            gaze_drift=gaze_drift,
        )
        evaluation = self.evaluator.evaluate(
            snapshot, question.text, question_id=question.id, status=status,
        )
        return self._complete(question, evaluation)

    def skip_question(self) -> AnswerEvaluation:
        """Skip the question in progress (scored 0 / F)"""
        self._ensure_active()
        question = self._require_question()
        evaluation = self.evaluator.skip(question.text, question_id=question.id)
        return self._complete(question, evaluation)

    def _complete(self, question: Question, evaluation: AnswerEvaluation) -> AnswerEvaluation:
        """Record the result and hand the caller a copy the session does not own"""
        result = evaluation.question_result
        self.result.append(result)
        self.history.append(QuestionHistory(
            question_id=question.id,
            question=question.text,
            transcript=result.transcript,
            status=result.status,
        ))
        self.current_question = None
        self._buffer.reset()

        if len(self.history) >= self.max_questions:
            logger.info("Reached %s questions, finishing session", self.max_questions)
            self.end()
        return replace(evaluation, question_result=replace(result))

    def end(self) -> SessionResult:
        """
        Finish the session and attach the overall grade.

        Any answer still in progress is discarded. Calling end() on a
        finished session returns the existing result.
        """
        if self.is_finished:
            return self.result

        if self.current_question is not None:
            logger.info("Discarding unfinished answer for %s", self.current_question.id)
            self.current_question = None
            self._buffer.reset()

        self.result.finish(compute_overall(self.result.questions))
        logger.info("Session finished: %s (%s)", self.result.overall.score, self.result.overall.grade)
        return self.result
