"""Typed provider failures."""

UNKNOWN_CAUSE = "Unknown error"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


class ProviderError(Exception):
    """Base class for failures attributable to one provider."""

    def __init__(self, provider: str, message: str):
        super().__init__(message)
        self.provider = provider


class ProviderCallError(ProviderError):
    """The remote text-generation call failed."""

    def __init__(self, provider: str, cause: str | None = None):
        self.cause = cause or UNKNOWN_CAUSE
        super().__init__(provider, f"{provider} API Error: {self.cause}")


class UnknownError(ProviderError):
    """A failure that carried no usable description."""

    def __init__(self, provider: str):
        super().__init__(provider, UNKNOWN_ERROR_MESSAGE)
