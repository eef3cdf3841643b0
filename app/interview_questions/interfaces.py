"""
Abstractions for pluggable services. Inversion of control: the controller
depends on interfaces, not concrete services. Enables fakes/mocks and
future swaps (another completion provider, a seeded random source).

Common protocols:
- RandomSource.randint(min, max) -> int in [min, max)
- CompletionClient.create_completion(request, timeout=...) -> CompletionResponse
- PromptFactory.build_prompt(job_title, job_description) -> str

Testing: Use simple fake implementations to test the controller without network calls.
"""

from __future__ import annotations
from typing import Optional, Protocol
from .models import CompletionRequest, CompletionResponse


class RandomSource(Protocol):
    def randint(self, min_value: int, max_value: int) -> int: ...


class CompletionClient(Protocol):
    def create_completion(
        self,
        request: CompletionRequest,
        *,
        timeout: Optional[float] = None,
    ) -> CompletionResponse: ...


class PromptFactory(Protocol):
    def build_prompt(self, job_title: str, job_description: str) -> str: ...
