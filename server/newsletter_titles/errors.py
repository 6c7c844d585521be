"""Error taxonomy shared by the handler and its clients."""

from typing import Optional

GENERIC_FAILURE = "Failed to generate titles"
QUOTA_MESSAGE = "OpenAI API quota exceeded. Please check your billing details or try again later."


class TitleGenerationError(Exception):
    """Base error; carries the message shown to the user and an HTTP status."""

    status_code = 500

    def __init__(self, message: str = GENERIC_FAILURE, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message or GENERIC_FAILURE
        if status_code is not None:
            self.status_code = status_code


class ConfigurationError(TitleGenerationError):
    """The server is missing something it needs, e.g. the API key."""


class UpstreamError(TitleGenerationError):
    """The chat-completion API answered with a failure or an unusable reply."""


class QuotaExceededError(TitleGenerationError):
    status_code = 402

    def __init__(self, message: str = QUOTA_MESSAGE, status_code: Optional[int] = None):
        super().__init__(message, status_code)
