"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from interview_prep.clients.llm_client import LLMResponse, TextGenerator
from interview_prep.models.request import GenerationRequest


class FakeTextGenerator:
    """TextGenerator returning canned text, or raising a canned error."""

    def __init__(self, text: str = "{}", error: Exception | None = None):
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    async def generate(self, prompt: str, system: str = "") -> LLMResponse:
        self.calls.append({"prompt": prompt, "system": system})
        if self.error is not None:
            raise self.error
        return LLMResponse(text=self.text, input_tokens=100, output_tokens=50)


def make_result(section_sizes: list[int]) -> dict:
    """Build a well-formed result dict with the given number of items per section."""
    titles = ["General", "Technical", "Experience", "Behavioral"]
    sections = []
    for s, size in enumerate(section_sizes):
        sections.append({
            "title": titles[s % len(titles)],
            "description": f"{titles[s % len(titles)]} questions",
            "items": [
                {
                    "question": f"Question {s + 1}.{i + 1}?",
                    "answer": f"Answer {s + 1}.{i + 1}.",
                    "tags": ["backend", f"tag-{i + 1}"],
                }
                for i in range(size)
            ],
        })
    return {
        "roleSummary": "A senior backend role focused on distributed systems.",
        "candidateSummary": "Five years of backend work with strong API design.",
        "tellMeAboutYourself": {
            "question": "Tell me about yourself",
            "longAnswer": "I started as a backend engineer five years ago...",
            "shortAnswer": "I'm a backend engineer with five years of experience.",
        },
        "sections": sections,
        "suggestionsForInterviewerQuestions": [
            "What does success look like in the first 90 days?",
            "How is the team structured?",
            "What are the biggest technical challenges right now?",
        ],
    }


@pytest.fixture
def sample_jd_text() -> str:
    return """Backend engineer role (Senior)

Responsibilities:
- Design and build RESTful APIs serving millions of requests per day
- Own service reliability and observability

Requirements:
- 5+ years of Python or Go
- PostgreSQL, Redis, Kafka
- Experience with Kubernetes
"""


@pytest.fixture
def sample_resume_text() -> str:
    return """Jordan Lee
jordan@example.com

Experience:
- Acme Corp (2021 - present) - Backend Engineer
  - Built Python/FastAPI services handling 1M requests/day
  - Cut p99 latency by 40% with Redis caching
- Startup Inc (2019 - 2021) - Software Engineer
  - Django REST APIs, PostgreSQL

Skills: Python, Go, PostgreSQL, Redis, Docker, Kubernetes
"""


@pytest.fixture
def valid_payload(sample_jd_text, sample_resume_text) -> dict:
    return {
        "jobDescription": sample_jd_text,
        "resume": sample_resume_text,
        "targetRoleLevel": "Senior",
        "interviewType": "Technical",
        "numQuestions": 10,
    }


@pytest.fixture
def sample_request(valid_payload) -> GenerationRequest:
    return GenerationRequest(**valid_payload)


@pytest.fixture
def sample_result_json() -> dict:
    """A well-formed 10-question result across three sections."""
    return make_result([4, 4, 2])


@pytest.fixture
def fake_llm(sample_result_json) -> FakeTextGenerator:
    return FakeTextGenerator(text=json.dumps(sample_result_json))


@pytest.fixture
def mock_llm_client() -> TextGenerator:
    """Create a mock LLM client."""
    client = AsyncMock()
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    return client


@pytest.fixture
def fake_llm_factory():
    """Build a FakeTextGenerator with custom text or error."""
    return FakeTextGenerator


@pytest.fixture
def result_factory():
    """Build a result dict from a list of per-section item counts."""
    return make_result
