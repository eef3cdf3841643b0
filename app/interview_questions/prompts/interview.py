"""Interview question prompts (one per combination of title/description)"""

from __future__ import annotations

from ..utils.text import normalize_input

PROMPT_PREFIX = "Create a list of questions for my interview with a"


def build_interview_prompt(job_title: str, job_description: str) -> str:
    """
    Inputs are expected to be trimmed already. Returns "" when both are
    empty; the controller rejects that case before getting here.
    """
    # TODO: when a cap is requested, ask for "a list of N questions" instead
    if job_title and job_description:
        return (
            f"{PROMPT_PREFIX} {normalize_input(job_title)}, "
            f"{normalize_input(job_description)}"
        )
    if job_title:
        return f"{PROMPT_PREFIX} {normalize_input(job_title)}"
    if job_description:
        return f"{PROMPT_PREFIX} job description of {normalize_input(job_description)}"
    return ""
