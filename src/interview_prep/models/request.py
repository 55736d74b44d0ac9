"""Pydantic model for a validated generation request."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class RoleLevel(str, Enum):
    JUNIOR = "Junior"
    MID = "Mid"
    SENIOR = "Senior"
    LEAD = "Lead"


class InterviewType(str, Enum):
    GENERAL = "General"
    TECHNICAL = "Technical"
    MIXED = "Mixed"


class GenerationRequest(BaseModel):
    job_description: str = Field(alias="jobDescription")
    resume: str
    target_role_level: RoleLevel = Field(alias="targetRoleLevel")
    interview_type: InterviewType = Field(alias="interviewType")
    num_questions: int = Field(alias="numQuestions")

    model_config = {"populate_by_name": True, "use_enum_values": True}

    def to_payload(self) -> dict:
        """Serialize with the camelCase keys the HTTP API expects."""
        return self.model_dump(by_alias=True)
