"""Streamlit Web UI for interview-prep.

Paste a job description and a resume, pick the role level, interview type and
question count, and get a tailored interview plan with a .txt download.
"""

from __future__ import annotations

import logging
import os
from dataclasses import asdict

logger = logging.getLogger(__name__)

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv

load_dotenv()

# Streamlit Cloud: sync st.secrets → os.environ so the API URL override is visible
for key in ("INTERVIEW_PREP_API_URL",):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from interview_prep.config import load_config
from interview_prep.export.text_export import export_filename, render_text
from interview_prep.models.result import GenerationResult
from interview_prep.ui import (
    INTERVIEW_TYPE_LABELS,
    QUESTION_COUNT_OPTIONS,
    RESULTS_ANCHOR,
    ROLE_LEVEL_LABELS,
    FormState,
    SubmitError,
    script_text,
    scroll_script,
    submit_request,
)
from interview_prep.validation import MAX_INPUT_CHARS

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="Interview Prep Generator",
    page_icon=":briefcase:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Session state
# ---------------------------------------------------------------------------

_DEFAULTS = FormState()
for field_name, default in asdict(_DEFAULTS).items():
    if field_name not in st.session_state:
        st.session_state[field_name] = default

if "is_loading" not in st.session_state:
    st.session_state.is_loading = False
if "error" not in st.session_state:
    st.session_state.error = None
if "result" not in st.session_state:
    st.session_state.result = None
if "scroll_pending" not in st.session_state:
    st.session_state.scroll_pending = False


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _current_form() -> FormState:
    return FormState(
        job_description=st.session_state.job_description,
        resume=st.session_state.resume,
        target_role_level=st.session_state.target_role_level,
        interview_type=st.session_state.interview_type,
        num_questions=st.session_state.num_questions,
    )


def _on_submit():
    st.session_state.is_loading = True
    st.session_state.error = None
    st.session_state.result = None


def _run_generation():
    config = load_config()
    with st.spinner("Generating Interview Plan..."):
        try:
            result = submit_request(
                _current_form(),
                config.ui.resolved_api_url,
                timeout=config.ui.request_timeout,
            )
        except SubmitError as e:
            st.session_state.error = e.message
        else:
            st.session_state.result = result
            st.session_state.scroll_pending = True
        finally:
            st.session_state.is_loading = False
    st.rerun()


# ---------------------------------------------------------------------------
# Form
# ---------------------------------------------------------------------------


def _render_form():
    st.title("Interview Prep Generator")
    st.markdown(
        "Paste your job description and resume below to get tailored interview "
        'questions, answers, and a "Tell me about yourself" script.'
    )

    with st.form("interview_prep_form", border=True):
        col1, col2 = st.columns(2)
        with col1:
            st.text_area(
                "Job Description *",
                key="job_description",
                height=256,
                max_chars=MAX_INPUT_CHARS,
                placeholder="Paste the full job description here...",
            )
        with col2:
            st.text_area(
                "Resume *",
                key="resume",
                height=256,
                max_chars=MAX_INPUT_CHARS,
                placeholder="Paste your resume text here...",
            )

        col3, col4, col5 = st.columns(3)
        with col3:
            st.selectbox(
                "Target Role Level",
                options=list(ROLE_LEVEL_LABELS),
                format_func=ROLE_LEVEL_LABELS.get,
                key="target_role_level",
            )
        with col4:
            st.selectbox(
                "Interview Type",
                options=list(INTERVIEW_TYPE_LABELS),
                format_func=INTERVIEW_TYPE_LABELS.get,
                key="interview_type",
            )
        with col5:
            st.radio(
                "Number of Questions",
                QUESTION_COUNT_OPTIONS,
                horizontal=True,
                key="num_questions",
            )

        st.form_submit_button(
            "Generating Interview Plan..." if st.session_state.is_loading else "Generate Q&A",
            type="primary",
            disabled=st.session_state.is_loading,
            on_click=_on_submit,
            use_container_width=True,
        )

    if st.session_state.error:
        st.error(st.session_state.error)


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def _render_download(result: GenerationResult | None):
    st.download_button(
        label="Download .txt",
        data=render_text(result).encode("utf-8") if result else b"",
        file_name=export_filename(),
        mime="text/plain",
        disabled=result is None,
    )


def _render_results(result: GenerationResult):
    st.markdown(f'<div id="{RESULTS_ANCHOR}"></div>', unsafe_allow_html=True)

    head, action = st.columns([4, 1])
    with head:
        st.header("Your Interview Plan")
    with action:
        _render_download(result)

    col1, col2 = st.columns(2)
    with col1, st.container(border=True):
        st.caption("ROLE SUMMARY")
        st.write(result.role_summary)
    with col2, st.container(border=True):
        st.caption("CANDIDATE FIT")
        st.write(result.candidate_summary)

    with st.container(border=True):
        st.subheader("Tell Me About Yourself")
        st.markdown("**Long Version (~2 min)**")
        st.text(script_text(result.long_answer))
        st.divider()
        st.markdown("**Short Version (~45 sec)**")
        st.text(script_text(result.short_answer))

    for section in result.sections:
        st.subheader(section.title)
        if section.description:
            st.caption(section.description)
        for item in section.items:
            with st.container(border=True):
                st.markdown(f"**{item.question}**")
                st.write(item.answer)
                if item.tags:
                    st.markdown(" ".join(f"`{tag}`" for tag in item.tags))

    with st.container(border=True):
        st.subheader("Questions to Ask the Interviewer")
        for i, question in enumerate(result.suggestions_for_interviewer_questions, 1):
            st.markdown(f"{i}. {question}")

    if st.session_state.scroll_pending:
        st.session_state.scroll_pending = False
        components.html(scroll_script(), height=0)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

_render_form()

if st.session_state.is_loading:
    _run_generation()

result = st.session_state.result
if result is not None:
    _render_results(result)
else:
    _render_download(None)

st.divider()
st.caption("Answers are generated by an AI model. Review them before your interview.")
