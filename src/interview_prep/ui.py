"""Streamlit-independent helpers for the web UI.

The Streamlit script keeps only layout; form defaults, the HTTP call to the
API and display fallbacks live here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from interview_prep.models.result import GenerationResult
from interview_prep.validation import ALLOWED_QUESTION_COUNTS

logger = logging.getLogger(__name__)

GENERATE_PATH = "/api/generate-qa"
FALLBACK_ERROR = "Failed to generate Q&A"
NOT_AVAILABLE = "Not available."
SCROLL_DELAY_MS = 100
RESULTS_ANCHOR = "interview-plan"

ROLE_LEVEL_LABELS: dict[str, str] = {
    "Junior": "Junior",
    "Mid": "Mid-Level",
    "Senior": "Senior",
    "Lead": "Lead / Staff",
}

INTERVIEW_TYPE_LABELS: dict[str, str] = {
    "General": "General / Behavioral",
    "Technical": "Technical",
    "Mixed": "Mixed",
}

QUESTION_COUNT_OPTIONS = list(ALLOWED_QUESTION_COUNTS)


class SubmitError(Exception):
    """The API call failed; ``message`` is what the page shows."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


@dataclass
class FormState:
    """Form fields as held in the session."""

    job_description: str = ""
    resume: str = ""
    target_role_level: str = "Mid"
    interview_type: str = "Mixed"
    num_questions: int = 15

    def to_payload(self) -> dict:
        """Request body with the API's camelCase keys."""
        return {
            "jobDescription": self.job_description,
            "resume": self.resume,
            "targetRoleLevel": self.target_role_level,
            "interviewType": self.interview_type,
            "numQuestions": self.num_questions,
        }


def extract_error_message(response: httpx.Response) -> str:
    """Server-supplied ``error`` field, or the generic fallback."""
    try:
        data = response.json()
    except ValueError:
        return FALLBACK_ERROR
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return FALLBACK_ERROR


def submit_request(
    form: FormState,
    api_url: str,
    *,
    timeout: float = 300.0,
    client: httpx.Client | None = None,
) -> GenerationResult:
    """POST the form to the API and return the parsed result.

    Raises SubmitError on a non-2xx response, a transport failure or a body
    that is not a result object.
    """
    url = api_url.rstrip("/") + GENERATE_PATH
    owns_client = client is None
    client = client or httpx.Client(timeout=timeout)
    try:
        response = client.post(url, json=form.to_payload())
    except httpx.HTTPError as exc:
        logger.exception("Request to %s failed", url)
        raise SubmitError(str(exc) or FALLBACK_ERROR) from exc
    finally:
        if owns_client:
            client.close()

    if not response.is_success:
        raise SubmitError(extract_error_message(response), response.status_code)

    try:
        return GenerationResult.model_validate(response.json())
    except ValueError as exc:
        # pydantic.ValidationError is a ValueError subclass
        logger.warning("Unusable result body: %s", exc)
        raise SubmitError(FALLBACK_ERROR, response.status_code) from exc


def script_text(value: str | None) -> str:
    """Self-introduction text for display."""
    return value or NOT_AVAILABLE


def scroll_script(anchor_id: str = RESULTS_ANCHOR, delay_ms: int = SCROLL_DELAY_MS) -> str:
    """HTML snippet that scrolls the host page to ``anchor_id`` after a delay."""
    return (
        "<script>\n"
        "setTimeout(function () {\n"
        f"  var el = window.parent.document.getElementById({anchor_id!r});\n"
        "  if (el) { el.scrollIntoView({behavior: 'smooth'}); }\n"
        f"}}, {delay_ms});\n"
        "</script>"
    )
