"""QA Generator - turns a job description and resume into an interview plan."""

from __future__ import annotations

import logging

from interview_prep.clients.llm_client import TextGenerator
from interview_prep.errors import ParseError, UpstreamError
from interview_prep.models.request import GenerationRequest
from interview_prep.utils.json_parser import extract_json

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an expert interview preparation assistant. Your goal is to help a candidate prepare for a job interview by generating tailored questions and answers based on their resume and the job description.

Analyze the provided Job Description and Resume.
Produce a structured JSON response containing:
1. A concise "Role Summary" (what the company is looking for).
2. A "Candidate Summary" (how the candidate fits).
3. A "Tell me about yourself" section with two versions:
   - longAnswer: ~2 minutes spoken, detailed.
   - shortAnswer: ~45 seconds spoken, elevator pitch.
4. Exactly {num_questions} interview questions divided into logical sections (e.g., General, Technical, Experience, etc.).
   - For each question, provide a high-quality, spoken-English answer that highlights the candidate's strengths from their resume.
   - Add relevant tags to each question.
5. A list of 3-5 "Questions to ask the interviewer".

Target Role Level: {role_level}
Interview Type: {interview_type}

IMPORTANT:
- Do NOT hallucinate companies, projects, or skills not present in the resume or implied by the JD.
- Use professional but natural spoken English.
- Return ONLY valid JSON matching the specified structure. No markdown formatting.
- Ensure the "tellMeAboutYourself" object is present with "longAnswer" and "shortAnswer" keys.

Example JSON Structure:
{{
  "roleSummary": "...",
  "candidateSummary": "...",
  "tellMeAboutYourself": {{
    "question": "Tell me about yourself",
    "longAnswer": "...",
    "shortAnswer": "..."
  }},
  "sections": [
    {{
      "title": "General",
      "description": "...",
      "items": [
        {{ "question": "...", "answer": "...", "tags": ["..."] }}
      ]
    }}
  ],
  "suggestionsForInterviewerQuestions": ["..."]
}}"""


def build_system_prompt(request: GenerationRequest) -> str:
    return SYSTEM_PROMPT.format(
        num_questions=request.num_questions,
        role_level=request.target_role_level,
        interview_type=request.interview_type,
    )


def build_user_prompt(request: GenerationRequest) -> str:
    return f"""JOB DESCRIPTION:
{request.job_description}

RESUME:
{request.resume}
"""


class QAGenerator:
    def __init__(self, llm: TextGenerator):
        self.llm = llm

    async def generate(self, request: GenerationRequest) -> dict:
        """Generate an interview plan and return the model's JSON object as-is."""
        logger.info(
            "Generating %d questions (%s, %s)",
            request.num_questions,
            request.target_role_level,
            request.interview_type,
        )
        response = await self.llm.generate(
            prompt=build_user_prompt(request),
            system=build_system_prompt(request),
        )
        if not response.text or not response.text.strip():
            raise UpstreamError("empty_response", "Empty response from AI model")

        try:
            return extract_json(response.text)
        except ValueError as exc:
            logger.warning("Model returned unparseable output: %s", exc)
            raise ParseError(
                "invalid_json", "AI model returned invalid JSON"
            ) from exc
