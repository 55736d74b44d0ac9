"""Utility to decode the JSON object returned by the model."""

from __future__ import annotations

import json


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are not JSON
    raise json.JSONDecodeError(f"Invalid constant {name}", name, 0)


def _loads(text: str):
    return json.loads(text, parse_constant=_reject_constant)


def extract_json(text: str) -> dict:
    """Decode a JSON object from an LLM response.

    Tries in order:
    1. Direct json.loads on the full text
    2. Strip a surrounding fenced code block (```json ... ```) and parse

    Truncated or otherwise malformed output is never repaired, so a caller
    either gets the whole object or a ValueError.
    """
    text = (text or "").strip()

    # 1) Direct parse
    try:
        data = _loads(text)
    except json.JSONDecodeError:
        # 2) Strip fenced code block markers
        stripped = _strip_code_fences(text)
        if stripped == text:
            raise ValueError(f"Could not extract JSON from text: {text[:200]}...") from None
        try:
            data = _loads(stripped)
        except json.JSONDecodeError:
            raise ValueError(f"Could not extract JSON from text: {text[:200]}...") from None

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    # Remove opening fence (```json, ```, etc.)
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    # Remove closing fence
    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()
