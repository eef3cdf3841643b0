"""
Purpose: The single orchestration point for one interview-questions call.
It validates input, builds the prompt, invokes the completion client, and
assembles the capped result. Keeps the UI from knowing how prompts/LLM/parsing work.

Key responsibilities:
- Reject empty input and missing settings before any external call.
- Fill a missing model on a copy of the settings (caller's value untouched).
- Build the prompt (prompts), call the client (services.completion).
- Parse choices (services.question_parser), cap and re-index.
- Return an InterviewResult with the echoed request and the elapsed time.

Stateless between calls, so one controller can serve concurrent callers.

Testing: Pure unit tests with fakes: FakeCompletionClient, scripted RandomSource.
"""

from __future__ import annotations
import logging
import time
from typing import Optional

from .errors import InvalidInput, MissingSettings
from .interfaces import CompletionClient, PromptFactory, RandomSource
from .models import (
    CompletionSettings,
    InterviewInput,
    InterviewOptions,
    InterviewRequest,
    InterviewResult,
    INTERVIEW_DEFAULT_CAP,
    INTERVIEW_DEFAULT_MODEL,
)
from .prompts import DefaultPromptFactory
from .services.completion import complete
from .services.question_parser import parse_interview_choice
from .services.security import DefaultSecurity
from .services.settings_factory import with_defaults
from .utils.text import trim_str

logger = logging.getLogger(__name__)


class InterviewQuestionsController:
    def __init__(
        self,
        client: CompletionClient,
        *,
        rng: Optional[RandomSource] = None,
        default_model: str = INTERVIEW_DEFAULT_MODEL,
        timeout: Optional[float] = None,
    ):
        self.client: CompletionClient = client
        self.prompts: PromptFactory = DefaultPromptFactory()
        self.security = DefaultSecurity()
        self.rng = rng
        self.default_model = default_model
        self.timeout = timeout

    def _clean_input(self, interview_input: InterviewInput) -> tuple[str, str]:
        job_title = trim_str(interview_input.job_title)
        job_desc = trim_str(interview_input.job_description)
        if not job_title and not job_desc:
            raise InvalidInput("Must specify a job title or description.")

        job_title = self.security.sanitize_for_prompt(job_title)
        job_desc = self.security.sanitize_for_prompt(job_desc)
        # Only control characters were given; nothing left to build a prompt from.
        if not job_title and not job_desc:
            raise InvalidInput("Job title and description contain no usable text.")

        return (
            self.security.validate_job_title_length(job_title),
            self.security.validate_job_description_length(job_desc),
        )

    def run(
        self,
        interview_input: InterviewInput,
        settings: Optional[CompletionSettings],
        options: Optional[InterviewOptions] = None,
        *,
        timeout: Optional[float] = None,
    ) -> InterviewResult:
        """
        Generate interview questions for a job title and/or description.
        Raises InvalidInput / MissingSettings before calling out; errors from
        the completion client propagate unchanged.
        """
        start = time.monotonic()
        job_title, job_desc = self._clean_input(interview_input)

        if settings is None:
            raise MissingSettings("Completion settings are required.")
        settings = with_defaults(settings, self.default_model)
        if options is None:
            options = InterviewOptions(cap=INTERVIEW_DEFAULT_CAP)

        prompt = self.prompts.build_prompt(job_title, job_desc)
        logger.debug("Interview prompt: %s", prompt)
        ques_cap = max(options.get_cap(), 0)

        resp = complete(
            self.client,
            settings,
            prompt,
            timeout=timeout if timeout is not None else self.timeout,
        )

        result = InterviewResult(
            request=InterviewRequest(prompt=prompt, settings=settings),
            options=options,
            model=resp.model or settings.model,
            usage=resp.usage,
        )

        # Only one choice is requested (n=1); loop stays general.
        for ch in resp.choices:
            for qu in parse_interview_choice(ch, options.shuffle, self.rng):
                if len(result.questions) >= ques_cap:
                    break
                # Re-index so shuffled/capped lists stay 1..N
                qu.index = len(result.questions) + 1
                result.questions.append(qu)

        result.duration = time.monotonic() - start

        if not result.has_questions():
            logger.warning("Completion returned no usable questions (model=%s)", result.model)
        logger.info(
            "Generated %d interview questions in %.2fs (model=%s)",
            len(result.questions),
            result.duration,
            result.model,
        )
        return result


def interview_questions(
    client: CompletionClient,
    interview_input: InterviewInput,
    settings: Optional[CompletionSettings],
    options: Optional[InterviewOptions] = None,
    *,
    timeout: Optional[float] = None,
) -> InterviewResult:
    """One-shot convenience wrapper around InterviewQuestionsController.run."""
    return InterviewQuestionsController(client).run(
        interview_input, settings, options, timeout=timeout
    )
