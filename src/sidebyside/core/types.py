"""
Shared type definitions.

Records exchanged between adapters, the aggregator and the presentation layer.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from sidebyside.llm.errors import ProviderError


@dataclass(frozen=True)
class AdapterResult:
    """Normalized outcome of one successful provider call."""

    response: str
    response_time: int  # milliseconds, measured around the remote call


ProviderCall = Callable[[str], Awaitable[AdapterResult]]


@dataclass(frozen=True)
class ProviderDescriptor:
    """One configured provider as seen by the aggregator."""

    name: str
    model: str
    adapter: ProviderCall


@dataclass(frozen=True)
class AIResponse:
    """Result for one provider in one aggregation call.

    Exactly one of (non-empty ``response``, no ``error``) or
    (empty ``response``, ``error`` set) holds.
    """

    provider: str
    response: str
    response_time: int
    error: str | None = None
    failure: ProviderError | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if (self.response == "") != (self.error is not None):
            raise ValueError(
                f"AIResponse for {self.provider} must carry either a response or an error"
            )
        if self.response_time < 0:
            raise ValueError(f"Negative response time for {self.provider}: {self.response_time}")

    @classmethod
    def success(cls, provider: str, result: AdapterResult) -> "AIResponse":
        return cls(provider=provider, response=result.response, response_time=result.response_time)

    @classmethod
    def failed(cls, provider: str, failure: ProviderError, response_time: int) -> "AIResponse":
        return cls(
            provider=provider,
            response="",
            error=str(failure),
            response_time=response_time,
            failure=failure,
        )

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Wire shape consumed by presentation layers."""
        data: dict[str, Any] = {
            "provider": self.provider,
            "response": self.response,
            "responseTime": self.response_time,
        }
        if self.error is not None:
            data["error"] = self.error
        return data
