"""FastAPI app exposing the generate-qa endpoint."""

from __future__ import annotations

import json
import logging
from typing import Callable

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from interview_prep.clients.llm_client import GeminiClient, TextGenerator
from interview_prep.config import AppConfig, get_api_key, load_config
from interview_prep.errors import InterviewPrepError, ValidationError
from interview_prep.pipeline.qa_generator import QAGenerator
from interview_prep.validation import validate_request

logger = logging.getLogger(__name__)

GeneratorFactory = Callable[[], TextGenerator]


def _error_response(exc: InterviewPrepError) -> JSONResponse:
    return JSONResponse(
        {"error": exc.message, "code": exc.code},
        status_code=exc.status_code,
    )


def create_app(
    config: AppConfig | None = None,
    generator_factory: GeneratorFactory | None = None,
) -> FastAPI:
    """Build the API app.

    ``generator_factory`` is called once per request after validation; the
    default builds a GeminiClient from ``GEMINI_API_KEY``, so a missing key
    fails before any network call.
    """
    config = config or load_config()

    def default_factory() -> TextGenerator:
        return GeminiClient(
            api_key=get_api_key(),
            model=config.llm.model,
            timeout=config.llm.timeout,
        )

    factory = generator_factory or default_factory

    app = FastAPI(title="Interview Prep Generator", version="0.1.0")

    @app.exception_handler(InterviewPrepError)
    async def handle_interview_prep_error(
        request: Request, exc: InterviewPrepError
    ) -> JSONResponse:
        if isinstance(exc, ValidationError):
            logger.info("Rejected request: %s", exc.code)
        else:
            logger.error("Generation failed (%s): %s", exc.code, exc.message)
        return _error_response(exc)

    @app.post("/api/generate-qa")
    async def generate_qa(request: Request):
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise ValidationError(
                "invalid_request_body", "Request body must be valid JSON."
            ) from exc

        qa_request = validate_request(body)
        try:
            generator = QAGenerator(factory())
            result = await generator.generate(qa_request)
            return JSONResponse(result)
        except InterviewPrepError:
            raise
        except Exception as exc:
            # Starlette re-raises from catch-all handlers, so convert here
            logger.exception("API route error")
            return JSONResponse(
                {"error": str(exc) or "Internal Server Error"},
                status_code=500,
            )

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
