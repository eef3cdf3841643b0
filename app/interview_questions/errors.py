"""Exception taxonomy. Validation errors are raised before any external call."""


class InterviewQuestionsError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInput(InterviewQuestionsError, ValueError):
    """Neither a job title nor a job description was provided."""


class MissingSettings(InterviewQuestionsError, ValueError):
    """Completion settings were not supplied."""


class IncompleteSettings(InterviewQuestionsError, ValueError):
    """Settings lack a value the completion request cannot do without."""


class ExternalCallFailure(InterviewQuestionsError):
    """The completion service failed; the SDK error is kept as __cause__."""


class ConfigError(InterviewQuestionsError, ValueError):
    pass
