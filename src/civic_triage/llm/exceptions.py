"""
Custom exceptions for the LLM client layer.

Clients raise these instead of returning partial results. The
orchestrator catches the whole hierarchy and treats any of them as
"provider unavailable, try the next one"; none of them reach the caller
of ``classify``.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.

    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class LLMNotConfiguredError(LLMClientError):
    """
    Raised when a client without an API key is asked to generate.

    The orchestrator never schedules unconfigured providers, so seeing this
    means a wiring bug rather than a provider problem.
    """
    pass


class LLMConnectionError(LLMClientError):
    """
    Raised when unable to reach the provider.

    Includes network errors, DNS failures, refused connections.
    """
    pass


class LLMTimeoutError(LLMConnectionError):
    """
    Raised when the call exceeds the fixed timeout.

    The call is abandoned, not retried.
    """
    pass


class LLMGenerationError(LLMClientError):
    """
    Raised when the provider answers but the answer is unusable.

    Examples:
    - Non-2xx status
    - Body is not JSON
    - No choices or empty message content
    """
    pass


class LLMAuthenticationError(LLMGenerationError):
    """
    Raised on 401/403: the configured key was rejected.
    """
    pass


class LLMRateLimitError(LLMGenerationError):
    """
    Raised on 429: the provider is throttling us.
    """
    pass
