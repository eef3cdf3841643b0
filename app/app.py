"""
UI layer
Purpose: Streamlit-only glue. Renders widgets, collects the job title /
description and generation options, and delegates all work to the
controller. Keeps UI concerns separate from business logic so logic can be
unit tested without Streamlit.
"""

import streamlit as st
from typing import Optional

from interview_questions.config import configure_logging, load_config
from interview_questions.controller import InterviewQuestionsController
from interview_questions.errors import InterviewQuestionsError
from interview_questions.models import (
    InterviewInput,
    InterviewOptions,
    INTERVIEW_DEFAULT_CAP,
    INTERVIEW_MAX_CAP,
)
from interview_questions.services.llm_openai import OpenAICompletionClient
from interview_questions.services.pricing import (
    estimate_tokens_from_text,
    estimate_usage_cost,
    model_options,
)
from interview_questions.services.settings_factory import (
    diversity_settings,
    stable_settings,
)
from interview_questions.utils.documents import read_job_description


config = load_config()
configure_logging(config)

# ---------------------------
# Page config
# ---------------------------
st.set_page_config(
    page_title="Interview Questions",
    page_icon="🎯",
    layout="wide",
    initial_sidebar_state="expanded",
)
# ---------------------------
# UI constants
# ---------------------------
PROFILE_STABLE = "Stable"
PROFILE_DIVERSITY = "Diversity"
PROFILES = [PROFILE_STABLE, PROFILE_DIVERSITY]

# ---------------------------
# Session state init
# ---------------------------
st_session = st.session_state
st_session.setdefault("controller", None)
st_session.setdefault("api_key_set", False)
st_session.setdefault("model", config.model)
st_session.setdefault("profile", PROFILE_STABLE)
st_session.setdefault("last_result", None)
st_session.setdefault("user_id", "streamlit")


# ---------------------------
# Helpers
# ---------------------------
def get_controller() -> Optional[InterviewQuestionsController]:
    """Return the controller object."""
    return st_session.get("controller")


def build_settings(profile: str, model: str):
    """Settings for the chosen profile with the sidebar model applied."""
    if profile == PROFILE_DIVERSITY:
        settings = diversity_settings(st_session.user_id)
    else:
        settings = stable_settings(st_session.user_id)
    settings.model = model
    return settings


# ---------------------------
# SIDEBAR: settings
# ---------------------------
with st.sidebar:
    st.markdown("# Settings")

    st.markdown("## OPEN AI API Key Required")
    user_api_key = st.sidebar.text_input(
        "Enter your API key",
        value=config.openai_api_key,
        type="password",
        help="We do not store your key. It stays in your session only.",
    )
    if not user_api_key:
        st.warning("Please enter your API key in the sidebar to continue.")
        st.stop()
    elif not st_session.api_key_set:
        try:
            llm = OpenAICompletionClient(
                api_key=user_api_key,
                base_url=config.openai_base_url,
                max_retries=config.max_retries,
            )
            st_session.controller = InterviewQuestionsController(
                llm, default_model=config.model, timeout=config.timeout
            )
            st_session.api_key_set = True
        except InterviewQuestionsError as e:
            st.error(f"OpenAI client init failed: {e}")
            st.stop()

    models = model_options(config.model)
    st_session.model = st.selectbox(
        "Model",
        models,
        index=models.index(st_session.model) if st_session.model in models else 0,
    )
    st_session.profile = st.radio(
        "Settings profile",
        PROFILES,
        horizontal=True,
        help="Stable gives reproducible settings; Diversity randomizes them per call.",
    )
    cap = st.slider("Max questions", 1, INTERVIEW_MAX_CAP, INTERVIEW_DEFAULT_CAP)
    shuffle = st.checkbox("Shuffle questions", value=False)

# ---------------------------
# MAIN: job input & results
# ---------------------------
st.title("Interview Questions")

job_title = st.text_input("Job title", placeholder="e.g. Senior Backend Engineer")
jd_mode = st.radio("Job description", ["Paste text", "Upload file"], horizontal=True)

job_desc = ""
if jd_mode == "Paste text":
    job_desc = st.text_area(
        "Paste JD text",
        placeholder="Paste the job description here (optional if a title is given)...",
        height=220,
    )
else:
    uploaded = st.file_uploader("Upload PDF or text", type=["pdf", "txt", "md"])
    if uploaded is not None:
        try:
            job_desc = read_job_description(uploaded.name, uploaded.getvalue())
            if not job_desc:
                st.toast("No selectable text found in the file.")
        except InterviewQuestionsError as e:
            st.error(str(e))

if st.button("Generate", type="primary"):
    controller = get_controller()
    try:
        with st.spinner("Generating questions..."):
            st_session.last_result = controller.run(
                InterviewInput(job_title=job_title, job_description=job_desc),
                build_settings(st_session.profile, st_session.model),
                InterviewOptions(cap=cap, shuffle=shuffle),
            )
    except InterviewQuestionsError as e:
        st.error(str(e))

result = st_session.last_result
if result is not None:
    if not result.has_questions():
        st.info("The model returned no usable questions. Try again or use Diversity.")
    for q in result.questions:
        st.markdown(f"**{q.index}.** {q.question}")

    if result.usage is not None:
        cost = estimate_usage_cost(result.model or st_session.model, result.usage)
        tokens = result.usage.total_tokens
    else:
        cost = 0.0
        tokens = estimate_tokens_from_text(result.request.prompt)
    st.caption(
        f"{result.duration:.2f}s · {tokens} tokens · ~${cost:.5f} · "
        f"temperature {result.request.settings.temperature} · "
        f"top_p {result.request.settings.top_p}"
    )
    with st.expander("Copy as text"):
        st.code(result.question_text(), language=None)
