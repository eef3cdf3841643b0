"""
Purpose: Guardrails for inputs.
Content: early, predictable failures; keep oversized titles/descriptions and
control characters out of the prompt.
"""

from __future__ import annotations

MAX_TITLE_CHARS = 200
MAX_JD_CHARS = 10000


class DefaultSecurity:
    def sanitize_for_prompt(self, text: str) -> str:
        return (text or "").replace("\x00", "").strip()

    def validate_job_title_length(self, text: str) -> str:
        return text[:MAX_TITLE_CHARS].rstrip()

    def validate_job_description_length(self, text: str) -> str:
        if len(text) > MAX_JD_CHARS:
            text = text[:MAX_JD_CHARS].rstrip()
        return text
