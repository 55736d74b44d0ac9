"""End-to-end: form to API to stubbed model to rendered result and text export."""

from __future__ import annotations

from datetime import date

from fastapi.testclient import TestClient

from interview_prep.api import create_app
from interview_prep.config import AppConfig
from interview_prep.export.text_export import export_filename, render_text
from interview_prep.ui import FormState, script_text, submit_request


def test_full_flow(fake_llm, sample_result_json):
    app = create_app(AppConfig(), generator_factory=lambda: fake_llm)
    form = FormState(
        job_description="Backend engineer role...",
        resume="5 years experience...",
        target_role_level="Senior",
        interview_type="Technical",
        num_questions=10,
    )

    with TestClient(app) as client:
        result = submit_request(form, "http://testserver", client=client)

    # The model saw the form data
    call = fake_llm.calls[0]
    assert "Backend engineer role..." in call["prompt"]
    assert "5 years experience..." in call["prompt"]
    assert "Target Role Level: Senior" in call["system"]

    # Everything the page renders is present
    assert result.role_summary == sample_result_json["roleSummary"]
    assert result.candidate_summary == sample_result_json["candidateSummary"]
    assert script_text(result.long_answer) != "Not available."
    assert script_text(result.short_answer) != "Not available."
    assert [s.title for s in result.sections] == ["General", "Technical", "Experience"]
    assert result.total_questions == 10
    assert all(item.tags for s in result.sections for item in s.items)
    assert len(result.suggestions_for_interviewer_questions) == 3

    # And the export carries all of it in the fixed format
    day = date(2026, 10, 17)
    text = render_text(result, day)
    assert export_filename(day) == "interview-prep-qa-2026-10-17.txt"
    assert sample_result_json["roleSummary"] in text
    assert sample_result_json["candidateSummary"] in text
    assert sample_result_json["tellMeAboutYourself"]["longAnswer"] in text
    assert sample_result_json["tellMeAboutYourself"]["shortAnswer"] in text
    for section in sample_result_json["sections"]:
        assert f"[SECTION: {section['title'].upper()}]" in text
        for item in section["items"]:
            assert f"A: {item['answer']}" in text
            assert f"Tags: {', '.join(item['tags'])}" in text
    for i, q in enumerate(sample_result_json["suggestionsForInterviewerQuestions"], 1):
        assert f"{i}. {q}" in text
