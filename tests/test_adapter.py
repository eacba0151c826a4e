"""Tests for provider adapters."""

import asyncio

import pytest

from sidebyside.llm.adapter import DEFAULT_MAX_TOKENS, ProviderAdapter
from sidebyside.llm.base import Generation, GeneratorKind, TextGenerator
from sidebyside.llm.errors import ProviderCallError


class FakeGenerator(TextGenerator):
    """Records calls and answers from canned values."""

    kind = GeneratorKind.LITELLM

    def __init__(self, text: str = "hello", exc: Exception | None = None, delay: float = 0.0):
        self.text = text
        self.exc = exc
        self.delay = delay
        self.calls: list[tuple[str, str, int]] = []
        self.closed = False

    async def generate(self, prompt: str, model: str, max_tokens: int) -> Generation:
        self.calls.append((prompt, model, max_tokens))
        await asyncio.sleep(self.delay)
        if self.exc is not None:
            raise self.exc
        return Generation(text=self.text, model=model)

    async def health_check(self, model: str) -> bool:
        return self.exc is None

    async def close(self) -> None:
        self.closed = True


@pytest.mark.asyncio
async def test_success_returns_text_and_timing():
    """Successful call yields text and a non-negative response time."""
    generator = FakeGenerator(text="4", delay=0.01)
    adapter = ProviderAdapter("OpenAI", "openai/gpt-4o-mini", generator)

    result = await adapter("What is 2+2?")

    assert result.response == "4"
    assert result.response_time >= 0
    assert generator.calls == [("What is 2+2?", "openai/gpt-4o-mini", DEFAULT_MAX_TOKENS)]


def test_default_max_tokens():
    """Adapters bound output to 1000 tokens unless configured."""
    assert DEFAULT_MAX_TOKENS == 1000
    adapter = ProviderAdapter("OpenAI", "m", FakeGenerator(), max_tokens=256)
    assert adapter.max_tokens == 256


@pytest.mark.asyncio
async def test_failure_is_prefixed_with_provider():
    """Underlying failure message is attributed to the provider."""
    original = RuntimeError("quota exceeded")
    adapter = ProviderAdapter("OpenAI", "m", FakeGenerator(exc=original))

    with pytest.raises(ProviderCallError) as exc_info:
        await adapter("prompt")

    assert str(exc_info.value) == "OpenAI API Error: quota exceeded"
    assert exc_info.value.provider == "OpenAI"
    assert exc_info.value.__cause__ is original


@pytest.mark.asyncio
async def test_messageless_failure_uses_placeholder():
    """Failures without a message fall back to 'Unknown error'."""
    adapter = ProviderAdapter("Google AI", "m", FakeGenerator(exc=ConnectionError()))

    with pytest.raises(ProviderCallError, match=r"^Google AI API Error: Unknown error$"):
        await adapter("prompt")


@pytest.mark.asyncio
async def test_timeout_is_attributed():
    """Configured deadline turns a hung call into a provider error."""
    adapter = ProviderAdapter("Google AI", "m", FakeGenerator(delay=1.0), timeout=0.01)

    with pytest.raises(ProviderCallError) as exc_info:
        await adapter("prompt")

    assert str(exc_info.value) == "Google AI API Error: timed out after 0.01s"


@pytest.mark.asyncio
async def test_transport_timeout_without_deadline():
    """A TimeoutError from the transport keeps its own message."""
    adapter = ProviderAdapter("OpenAI", "m", FakeGenerator(exc=TimeoutError("read timeout")))

    with pytest.raises(ProviderCallError, match="OpenAI API Error: read timeout"):
        await adapter("prompt")


@pytest.mark.asyncio
async def test_health_check_and_close_delegate():
    """Adapter forwards health checks and close to its generator."""
    generator = FakeGenerator()
    adapter = ProviderAdapter("OpenAI", "m", generator)

    assert await adapter.health_check()
    await adapter.close()
    assert generator.closed
