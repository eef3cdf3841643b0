"""
Purpose: Seam between interview settings and the completion call.
Maps settings + prompt into a CompletionRequest and invokes the client.
Errors from the client are not interpreted here, only propagated.
"""

from __future__ import annotations
import logging
from typing import Optional

from ..errors import IncompleteSettings
from ..interfaces import CompletionClient
from ..models import CompletionRequest, CompletionResponse, CompletionSettings

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("max_tokens", "temperature", "top_p")


def map_interview_settings(
    settings: CompletionSettings, prompt: str
) -> CompletionRequest:
    missing = [name for name in REQUIRED_FIELDS if getattr(settings, name) is None]
    if missing:
        raise IncompleteSettings(
            f"Completion settings missing required values: {', '.join(missing)}"
        )

    return CompletionRequest(
        model=settings.model,
        prompt=prompt,
        echo=False,
        frequency_penalty=settings.frequency_penalty,
        max_tokens=settings.max_tokens,
        n=1,
        presence_penalty=settings.presence_penalty,
        stream=False,
        temperature=settings.temperature,
        top_p=settings.top_p,
        user=settings.user,
    )


def complete(
    client: CompletionClient,
    settings: CompletionSettings,
    prompt: str,
    *,
    timeout: Optional[float] = None,
) -> CompletionResponse:
    request = map_interview_settings(settings, prompt)
    logger.debug(
        "Completion request: model=%s max_tokens=%s temperature=%s top_p=%s",
        request.model,
        request.max_tokens,
        request.temperature,
        request.top_p,
    )
    return client.create_completion(request, timeout=timeout)
