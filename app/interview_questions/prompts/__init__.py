"""Facade that exposes the prompt builders behind the PromptFactory API."""

from __future__ import annotations
from . import interview as _interview
from .interview import build_interview_prompt


class DefaultPromptFactory:
    def build_prompt(self, job_title: str, job_description: str) -> str:
        return _interview.build_interview_prompt(job_title, job_description)


__all__ = ["DefaultPromptFactory", "build_interview_prompt"]
