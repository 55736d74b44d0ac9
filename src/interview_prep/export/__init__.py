"""Text export module for interview-prep."""
from interview_prep.export.text_export import (
    export_filename,
    render_text,
)

__all__ = ["render_text", "export_filename"]
