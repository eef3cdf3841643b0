"""String helpers shared by prompt building and input validation."""

from __future__ import annotations
import re
from typing import Optional

_NEWLINE = re.compile(r"\r?\n")
BULLET = "•"


def trim_str(text: Optional[str]) -> str:
    if text is None:
        return ""
    return text.strip()


def normalize_input(text: str) -> str:
    """Collapse each line break to one space and drop bullet glyphs."""
    output = _NEWLINE.sub(" ", text)
    return output.replace(BULLET, "")
