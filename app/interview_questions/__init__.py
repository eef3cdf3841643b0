"""Interview question generation from a job title and/or description."""

from .controller import InterviewQuestionsController, interview_questions
from .errors import (
    ExternalCallFailure,
    IncompleteSettings,
    InterviewQuestionsError,
    InvalidInput,
    MissingSettings,
)
from .models import (
    CompletionSettings,
    InterviewInput,
    InterviewOptions,
    InterviewQuestion,
    InterviewResult,
)
from .services.settings_factory import diversity_settings, stable_settings

__all__ = [
    "CompletionSettings",
    "ExternalCallFailure",
    "IncompleteSettings",
    "InterviewInput",
    "InterviewOptions",
    "InterviewQuestion",
    "InterviewQuestionsController",
    "InterviewQuestionsError",
    "InterviewResult",
    "InvalidInput",
    "MissingSettings",
    "diversity_settings",
    "interview_questions",
    "stable_settings",
]
