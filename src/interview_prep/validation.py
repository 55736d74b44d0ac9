"""Request validation for the generate-qa endpoint.

Runs before any model call: a request that fails here never reaches the
provider. Text fields are passed through untouched (no trimming).
"""

from __future__ import annotations

from typing import Any

from interview_prep.errors import ValidationError
from interview_prep.models.request import GenerationRequest, InterviewType, RoleLevel

MAX_INPUT_CHARS = 20_000
ALLOWED_QUESTION_COUNTS = (10, 15, 20)

_ROLE_LEVELS = tuple(level.value for level in RoleLevel)
_INTERVIEW_TYPES = tuple(kind.value for kind in InterviewType)


def _is_valid_text(value: Any) -> bool:
    return isinstance(value, str) and 0 < len(value) <= MAX_INPUT_CHARS


def _normalize_question_count(value: Any) -> int | None:
    # bool is an int subclass; JSON true must not pass as 1
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value not in ALLOWED_QUESTION_COUNTS:
        return None
    return int(value)


def validate_request(payload: Any) -> GenerationRequest:
    """Validate a decoded request body and return a GenerationRequest.

    Raises ValidationError naming the first constraint that failed.
    """
    if not isinstance(payload, dict):
        raise ValidationError(
            "invalid_request_body", "Request body must be a JSON object."
        )

    job_description = payload.get("jobDescription")
    if not _is_valid_text(job_description):
        raise ValidationError(
            "missing_or_oversized_job_description",
            "Job description is required and must be under 20k characters.",
        )

    resume = payload.get("resume")
    if not _is_valid_text(resume):
        raise ValidationError(
            "missing_or_oversized_resume",
            "Resume is required and must be under 20k characters.",
        )

    num_questions = _normalize_question_count(payload.get("numQuestions"))
    if num_questions is None:
        raise ValidationError(
            "invalid_question_count",
            "Number of questions must be 10, 15, or 20.",
        )

    role_level = payload.get("targetRoleLevel")
    if role_level not in _ROLE_LEVELS:
        raise ValidationError(
            "invalid_target_role_level",
            f"Target role level must be one of: {', '.join(_ROLE_LEVELS)}.",
        )

    interview_type = payload.get("interviewType")
    if interview_type not in _INTERVIEW_TYPES:
        raise ValidationError(
            "invalid_interview_type",
            f"Interview type must be one of: {', '.join(_INTERVIEW_TYPES)}.",
        )

    return GenerationRequest(
        job_description=job_description,
        resume=resume,
        target_role_level=role_level,
        interview_type=interview_type,
        num_questions=num_questions,
    )
