"""
Interview session flow: question sequence, live transcript buffer and
the terminal session grade.
"""

from ..evaluators.results import SessionFinishedError
from .buffer import TranscriptBuffer
from .session import InterviewSession, QuestionHistory

__all__ = ['InterviewSession', 'QuestionHistory', 'TranscriptBuffer', 'SessionFinishedError']
