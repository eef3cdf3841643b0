from __future__ import annotations
from typing import Optional

import pytest

from interview_questions.models import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    CompletionUsage,
)


class FakeRandomSource:
    """Returns queued draws in order and records each requested range."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls: list[tuple[int, int]] = []

    def randint(self, min_value: int, max_value: int) -> int:
        self.calls.append((min_value, max_value))
        value = self.draws.pop(0)
        assert min_value <= value < max_value, (value, min_value, max_value)
        return value


class FakeCompletionClient:
    def __init__(self, text: str = "", *, error: Optional[Exception] = None, model="fake-model"):
        self.response = CompletionResponse(
            choices=[CompletionChoice(text=text, finish_reason="stop")],
            model=model,
            usage=CompletionUsage(prompt_tokens=12, completion_tokens=40, total_tokens=52),
        )
        self.error = error
        self.requests: list[CompletionRequest] = []
        self.timeouts: list[Optional[float]] = []

    def create_completion(self, request, *, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if self.error is not None:
            raise self.error
        return self.response


SEVEN_QUESTIONS = """

1. What is your experience with distributed systems?
2. How do you approach code reviews?
3) Describe a production incident you led?
- 4. How do you mentor junior engineers?
5. What NAS Solutions (enterprise and scale-out) are you familiar with?
6. How do you prioritize technical debt?
7. Why do you want to join our team?
8. Tell me about a time you"""


@pytest.fixture
def seven_questions() -> str:
    return SEVEN_QUESTIONS


@pytest.fixture
def fake_client(seven_questions) -> FakeCompletionClient:
    return FakeCompletionClient(seven_questions)
