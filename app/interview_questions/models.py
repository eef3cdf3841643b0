"""
Canonical data shapes, shared truth for typing/validation between layers.

Typical contents:
- InterviewInput (job title, job description).
- CompletionSettings (model, penalties, max_tokens, temperature, top_p, user).
- InterviewOptions (cap, shuffle) and the InterviewResult envelope.
- Completion* types: the wire-side request/response of the completion call,
  kept separate so callers are insulated from the SDK's own types.

Testing: Mostly types. get_cap/has_questions/question_text carry the logic.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional


INTERVIEW_DEFAULT_CAP = 5
INTERVIEW_MAX_CAP = 50
INTERVIEW_DEFAULT_MODEL = "gpt-3.5-turbo-instruct"


@dataclass(frozen=True)
class InterviewInput:
    job_title: Optional[str] = None
    job_description: Optional[str] = None


@dataclass
class CompletionSettings:
    """
    Granular overrides of the completion settings.
    Use temperature OR top_p to steer sampling; keep the other at 1.0.
    """

    model: str = ""
    frequency_penalty: float = 0.0
    max_tokens: Optional[int] = None
    presence_penalty: float = 0.0
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    user: str = ""


@dataclass
class InterviewOptions:
    # Cap for max number of questions to take
    cap: Optional[int] = None
    # If true, questions are randomly shuffled instead of taken in returned order
    shuffle: bool = False

    def get_cap(self) -> int:
        capped = INTERVIEW_DEFAULT_CAP if self.cap is None else self.cap
        return min(capped, INTERVIEW_MAX_CAP)


@dataclass
class InterviewQuestion:
    index: int
    question: str


@dataclass
class InterviewRequest:
    prompt: str
    settings: CompletionSettings


@dataclass
class CompletionRequest:
    model: str
    prompt: str
    echo: bool = False
    frequency_penalty: float = 0.0
    max_tokens: int = 16
    n: int = 1
    presence_penalty: float = 0.0
    stream: bool = False
    temperature: float = 1.0
    top_p: float = 1.0
    user: str = ""


@dataclass
class CompletionChoice:
    text: str
    index: int = 0
    # Unused by the parser; "length" means the output was cut off.
    finish_reason: Optional[str] = None


@dataclass
class CompletionUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass
class CompletionResponse:
    choices: list[CompletionChoice] = field(default_factory=list)
    model: Optional[str] = None
    usage: Optional[CompletionUsage] = None


@dataclass
class InterviewResult:
    request: InterviewRequest
    options: InterviewOptions
    duration: float = 0.0
    questions: list[InterviewQuestion] = field(default_factory=list)
    model: Optional[str] = None
    usage: Optional[CompletionUsage] = None

    def has_questions(self) -> bool:
        return len(self.questions) > 0

    def question_text(self) -> str:
        """Question texts separated by a blank line, none after the last."""
        return "\n\n".join(q.question for q in self.questions)
