"""
Purpose: Turn raw completion text into a list of InterviewQuestion.

Only lines ending in "?" count as questions. The last line is often cut off
by max_tokens and is dropped that way; finish_reason is not consulted, so a
truncated line that happens to end in "?" still gets through.
"""

from __future__ import annotations
from typing import Optional

from ..interfaces import RandomSource
from ..models import CompletionChoice, InterviewQuestion
from .shuffle import shuffle as shuffle_questions

# Markers sit at index 0..2: "1)" through "99)", "1.", "3."
MAX_MARKER_POS = 2


def strip_leading_number(question: str, punc: str) -> str:
    ques = question
    pos = ques.find(punc)

    if -1 < pos <= MAX_MARKER_POS:
        number = ques[:pos]
        if number.isascii() and number.isdigit():
            ques = ques[pos + 1 :]

    return ques.strip()


def strip_leading_numbers(question: str) -> str:
    """
    Strip "1." then "1)" style enumeration. Considers input like
    "3. What NAS Solutions (enterprise and scale-out) are you familiar with?"
    where the later parenthesis must be left alone.
    """
    result = strip_leading_number(question, ".")
    return strip_leading_number(result, ")")


def parse_text(question: str) -> str:
    ques = question.strip()
    if ques.startswith("-"):
        ques = ques[1:]
    return strip_leading_numbers(ques).strip()


def parse_interview_choice(
    choice: CompletionChoice,
    shuffle: bool = False,
    rng: Optional[RandomSource] = None,
) -> list[InterviewQuestion]:
    if not choice.text:
        return []

    data: list[InterviewQuestion] = []
    for part in choice.text.split("\n"):
        part = part.rstrip("\r")
        if part and part.endswith("?"):
            data.append(InterviewQuestion(index=len(data) + 1, question=parse_text(part)))

    if data and shuffle:
        shuffle_questions(data, rng)

    return data
