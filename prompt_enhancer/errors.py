"""Exceptions raised by the enhancement services.

Services raise these; the HTTP layer maps them to status codes.
"""


class EnhancerError(Exception):
    """Base class for prompt enhancer errors."""


class MissingPlatformError(EnhancerError, ValueError):
    def __init__(self) -> None:
        super().__init__("Platform is required in the request body")


class MissingPromptError(EnhancerError, ValueError):
    def __init__(self) -> None:
        super().__init__("Prompt is required in the request body")


class GuideNotFoundError(EnhancerError, LookupError):
    """No knowledge document is stored for the requested platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Guide not found for platform: {platform}")
        self.platform = platform


class CompletionError(EnhancerError):
    """The text-generation call failed or returned nothing usable."""

    def __init__(self, message: str, *, details: str = "") -> None:
        super().__init__(message)
        self.details = details or message
