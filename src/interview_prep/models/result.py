"""Pydantic models for the generated interview plan.

The model output is not schema-checked on the server; these models are the
lenient view the UI and text export use, so every field has a default and
unknown keys are kept.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

TELL_ME_ABOUT_YOURSELF = "Tell me about yourself"

_LENIENT = {"populate_by_name": True, "extra": "allow"}


class QAItem(BaseModel):
    question: str = ""
    answer: str = ""
    tags: list[str] = Field(default_factory=list)

    model_config = _LENIENT


class QASection(BaseModel):
    title: str = ""
    description: str | None = None
    items: list[QAItem] = Field(default_factory=list)

    model_config = _LENIENT


class TellMeAboutYourself(BaseModel):
    question: str = TELL_ME_ABOUT_YOURSELF
    long_answer: str | None = Field(default=None, alias="longAnswer")
    short_answer: str | None = Field(default=None, alias="shortAnswer")

    model_config = _LENIENT


class GenerationResult(BaseModel):
    role_summary: str = Field(default="", alias="roleSummary")
    candidate_summary: str = Field(default="", alias="candidateSummary")
    tell_me_about_yourself: TellMeAboutYourself | None = Field(
        default=None, alias="tellMeAboutYourself"
    )
    sections: list[QASection] = Field(default_factory=list)
    suggestions_for_interviewer_questions: list[str] = Field(
        default_factory=list, alias="suggestionsForInterviewerQuestions"
    )

    model_config = _LENIENT

    @property
    def long_answer(self) -> str | None:
        if self.tell_me_about_yourself is None:
            return None
        return self.tell_me_about_yourself.long_answer or None

    @property
    def short_answer(self) -> str | None:
        if self.tell_me_about_yourself is None:
            return None
        return self.tell_me_about_yourself.short_answer or None

    @property
    def total_questions(self) -> int:
        """Number of Q&A items across all sections.

        The prompt asks for exactly ``numQuestions`` items; nothing enforces it.
        """
        return sum(len(s.items) for s in self.sections)
