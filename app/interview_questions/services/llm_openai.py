"""
Purpose: Thin client wrapper around the OpenAI completions endpoint.
One place for auth, timeouts, model options, response/usage normalization.

Extensibility:
- Add other providers behind the CompletionClient protocol without touching
  the controller.

Testing: Pass a stub SDK object as `client`; assert request mapping and that
SDK errors come back as ExternalCallFailure with the original cause.
"""

from __future__ import annotations
import logging
from typing import Any, Optional

from openai import OpenAI, OpenAIError

from ..errors import ConfigError, ExternalCallFailure
from ..models import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    CompletionUsage,
)

logger = logging.getLogger(__name__)


class OpenAICompletionClient:
    def __init__(
        self,
        api_key: str = "",
        *,
        base_url: Optional[str] = None,
        max_retries: int = 0,
        client: Any = None,
    ):
        if client is not None:
            self.client = client
            return
        if not api_key:
            raise ConfigError("Missing OPENAI_API_KEY")
        try:
            self.client = OpenAI(
                api_key=api_key, base_url=base_url, max_retries=max_retries
            )
        except OpenAIError as e:
            raise ConfigError(f"Failed to initialize OpenAI client: {e}") from e

    def create_completion(
        self,
        request: CompletionRequest,
        *,
        timeout: Optional[float] = None,
    ) -> CompletionResponse:
        extra = {} if timeout is None else {"timeout": timeout}
        try:
            resp = self.client.completions.create(
                model=request.model,
                prompt=request.prompt,
                echo=request.echo,
                frequency_penalty=request.frequency_penalty,
                max_tokens=request.max_tokens,
                n=request.n,
                presence_penalty=request.presence_penalty,
                stream=request.stream,
                temperature=request.temperature,
                top_p=request.top_p,
                user=request.user,
                **extra,
            )
        except OpenAIError as e:
            logger.error("Completion call failed: %s", e)
            raise ExternalCallFailure(f"Completion call failed: {e}") from e

        return self._to_response(resp)

    @staticmethod
    def _to_response(resp) -> CompletionResponse:
        choices = [
            CompletionChoice(
                text=getattr(ch, "text", "") or "",
                index=getattr(ch, "index", i),
                finish_reason=getattr(ch, "finish_reason", None),
            )
            for i, ch in enumerate(resp.choices or [])
        ]
        usage = getattr(resp, "usage", None)
        return CompletionResponse(
            choices=choices,
            model=getattr(resp, "model", None),
            usage=CompletionUsage(
                prompt_tokens=usage.prompt_tokens,
                completion_tokens=usage.completion_tokens,
                total_tokens=usage.total_tokens,
            )
            if usage
            else None,
        )
