"""Tests for the QA generator with a fake text generator."""

import json

import pytest

from interview_prep.errors import ParseError, UpstreamError
from interview_prep.models.request import GenerationRequest
from interview_prep.pipeline.qa_generator import (
    QAGenerator,
    build_system_prompt,
    build_user_prompt,
)


class TestPrompts:
    def test_system_prompt_parameterized(self, sample_request):
        prompt = build_system_prompt(sample_request)
        assert "Exactly 10 interview questions" in prompt
        assert "Target Role Level: Senior" in prompt
        assert "Interview Type: Technical" in prompt

    def test_system_prompt_asks_for_json_structure(self, sample_request):
        prompt = build_system_prompt(sample_request)
        assert "Return ONLY valid JSON" in prompt
        assert '"tellMeAboutYourself"' in prompt
        assert '"suggestionsForInterviewerQuestions"' in prompt
        assert "3-5" in prompt
        # Example braces survive formatting
        assert '{ "question": "...", "answer": "...", "tags": ["..."] }' in prompt

    def test_system_prompt_varies_with_question_count(self, valid_payload):
        request = GenerationRequest(**{**valid_payload, "numQuestions": 20})
        assert "Exactly 20 interview questions" in build_system_prompt(request)

    def test_user_prompt_contains_literal_texts(self, sample_request, sample_jd_text, sample_resume_text):
        prompt = build_user_prompt(sample_request)
        assert prompt == f"JOB DESCRIPTION:\n{sample_jd_text}\n\nRESUME:\n{sample_resume_text}\n"


class TestQAGenerator:
    async def test_generate_returns_parsed_json(self, fake_llm, sample_request, sample_result_json):
        result = await QAGenerator(fake_llm).generate(sample_request)
        assert result == sample_result_json

    async def test_single_call_with_both_prompts(self, fake_llm, sample_request):
        await QAGenerator(fake_llm).generate(sample_request)
        assert len(fake_llm.calls) == 1
        call = fake_llm.calls[0]
        assert call["system"] == build_system_prompt(sample_request)
        assert call["prompt"] == build_user_prompt(sample_request)

    async def test_unknown_keys_passed_through(self, fake_llm_factory, sample_request):
        payload = {"roleSummary": "x", "unexpected": {"nested": [1, 2]}}
        llm = fake_llm_factory(text=json.dumps(payload))
        assert await QAGenerator(llm).generate(sample_request) == payload

    async def test_fifteen_questions_from_stub(self, fake_llm_factory, result_factory, valid_payload):
        request = GenerationRequest(**{**valid_payload, "numQuestions": 15})
        llm = fake_llm_factory(text=json.dumps(result_factory([5, 5, 5])))
        result = await QAGenerator(llm).generate(request)
        assert sum(len(s["items"]) for s in result["sections"]) == 15

    @pytest.mark.parametrize("text", ["", "   \n"])
    async def test_empty_response(self, fake_llm_factory, sample_request, text):
        llm = fake_llm_factory(text=text)
        with pytest.raises(UpstreamError) as exc_info:
            await QAGenerator(llm).generate(sample_request)
        assert exc_info.value.code == "empty_response"

    @pytest.mark.parametrize(
        "text",
        [
            "Sure! Here is your interview plan.",
            '{"roleSummary": "truncated',
            '["not", "an", "object"]',
            '{"roleSummary": NaN}',
            '{"sections": [{"title": "General", "score": -Infinity}]}',
        ],
    )
    async def test_invalid_json(self, fake_llm_factory, sample_request, text):
        llm = fake_llm_factory(text=text)
        with pytest.raises(ParseError) as exc_info:
            await QAGenerator(llm).generate(sample_request)
        assert exc_info.value.code == "invalid_json"

    async def test_upstream_error_propagates(self, fake_llm_factory, sample_request):
        llm = fake_llm_factory(error=UpstreamError("upstream_failure", "503 Service Unavailable"))
        with pytest.raises(UpstreamError, match="503"):
            await QAGenerator(llm).generate(sample_request)

    async def test_mock_client_prompt_includes_resume(self, mock_llm_client, sample_request):
        await QAGenerator(mock_llm_client).generate(sample_request)
        kwargs = mock_llm_client.generate.call_args.kwargs
        assert "Jordan Lee" in kwargs["prompt"]
