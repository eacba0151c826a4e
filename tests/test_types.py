"""Tests for shared types and error values."""

from dataclasses import FrozenInstanceError

import pytest

from sidebyside.core.types import AdapterResult, AIResponse
from sidebyside.llm.errors import ProviderCallError, ProviderError, UnknownError


def test_success_record():
    """Successful record carries text and no error."""
    r = AIResponse.success("OpenAI", AdapterResult(response="4", response_time=120))
    assert r.ok
    assert r.error is None
    assert r.to_dict() == {"provider": "OpenAI", "response": "4", "responseTime": 120}


def test_failed_record():
    """Failed record carries an error and empty response."""
    failure = ProviderCallError("Google AI", "timeout")
    r = AIResponse.failed("Google AI", failure, response_time=7)
    assert not r.ok
    assert r.response == ""
    assert r.failure is failure
    assert r.to_dict() == {
        "provider": "Google AI",
        "response": "",
        "responseTime": 7,
        "error": "Google AI API Error: timeout",
    }


@pytest.mark.parametrize(
    "response,error",
    [("", None), ("text", "also an error")],
)
def test_invariant_enforced(response, error):
    """Records need exactly one of response or error."""
    with pytest.raises(ValueError):
        AIResponse(provider="X", response=response, response_time=0, error=error)


def test_negative_time_rejected():
    with pytest.raises(ValueError):
        AIResponse(provider="X", response="ok", response_time=-1)


def test_records_are_immutable():
    r = AIResponse(provider="X", response="ok", response_time=0)
    with pytest.raises(FrozenInstanceError):
        r.response = "changed"


def test_error_messages():
    """Error values format their messages and keep the provider."""
    call_error = ProviderCallError("OpenAI", "rate limited")
    assert str(call_error) == "OpenAI API Error: rate limited"
    assert call_error.cause == "rate limited"

    assert str(ProviderCallError("OpenAI")) == "OpenAI API Error: Unknown error"

    unknown = UnknownError("OpenAI")
    assert str(unknown) == "Unknown error occurred"
    assert unknown.provider == "OpenAI"
    assert isinstance(unknown, ProviderError)
