"""Data models for the interview prep generator."""

from interview_prep.models.request import (
    GenerationRequest,
    InterviewType,
    RoleLevel,
)
from interview_prep.models.result import (
    GenerationResult,
    QAItem,
    QASection,
    TellMeAboutYourself,
)

__all__ = [
    "GenerationRequest",
    "GenerationResult",
    "InterviewType",
    "QAItem",
    "QASection",
    "RoleLevel",
    "TellMeAboutYourself",
]
