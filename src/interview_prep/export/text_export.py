"""Plain-text export of a generated interview plan."""

from __future__ import annotations

from datetime import date

from interview_prep.models.result import GenerationResult

RULE = "=" * 50
SECTION_RULE = "-" * 50
MISSING = "N/A"


def _display_date(day: date) -> str:
    # M/D/YYYY, no zero padding
    return f"{day.month}/{day.day}/{day.year}"


def render_text(result: GenerationResult, today: date | None = None) -> str:
    """Flatten a result into the fixed-format text document.

    Only the first line depends on ``today``; everything else is a pure
    function of ``result``.
    """
    today = today or date.today()
    lines: list[str] = [
        f"INTERVIEW PREP Q&A - {_display_date(today)}",
        RULE,
        "",
        "[ROLE SUMMARY]",
        result.role_summary,
        "",
        "[CANDIDATE SUMMARY]",
        result.candidate_summary,
        "",
        RULE,
        "",
        "[TELL ME ABOUT YOURSELF - LONG]",
        result.long_answer or MISSING,
        "",
        "[TELL ME ABOUT YOURSELF - SHORT]",
        result.short_answer or MISSING,
        "",
        RULE,
        "",
    ]

    for section in result.sections:
        lines.append(f"[SECTION: {section.title.upper()}]")
        if section.description:
            lines.append(section.description)
        lines.append("")
        for idx, item in enumerate(section.items, 1):
            lines.append(f"Q{idx}: {item.question}")
            lines.append(f"A: {item.answer}")
            lines.append(f"Tags: {', '.join(item.tags)}")
            lines.append("")
        lines.append(SECTION_RULE)
        lines.append("")

    lines.append("[QUESTIONS TO ASK THE INTERVIEWER]")
    for i, question in enumerate(result.suggestions_for_interviewer_questions, 1):
        lines.append(f"{i}. {question}")

    return "\n".join(lines)


def export_filename(today: date | None = None) -> str:
    """Download filename, e.g. ``interview-prep-qa-2026-10-17.txt``."""
    today = today or date.today()
    return f"interview-prep-qa-{today.isoformat()}.txt"
