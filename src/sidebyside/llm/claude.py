"""
Claude API generator.

Talks to Anthropic's Messages API through the official SDK.
"""

import anthropic
from anthropic import APIConnectionError, APIError, RateLimitError

from sidebyside.core.logging import get_logger
from sidebyside.llm.base import Generation, GeneratorKind, TextGenerator

logger = get_logger("llm.claude")


class ClaudeGenerator(TextGenerator):
    """Anthropic Claude API generator."""

    kind = GeneratorKind.ANTHROPIC

    def __init__(self, api_key: str | None = None):
        self.api_key = api_key
        self._client: anthropic.AsyncAnthropic | None = None

    @property
    def client(self) -> anthropic.AsyncAnthropic:
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str, model: str, max_tokens: int) -> Generation:
        logger.debug(f"Claude request: model={model}, max_tokens={max_tokens}")

        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except RateLimitError as e:
            logger.warning(f"Rate limited: {e}")
            raise
        except APIConnectionError as e:
            logger.error(f"Connection error: {e}")
            raise
        except APIError as e:
            logger.error(f"API error: {e}")
            raise

        text = "".join(block.text for block in response.content if block.type == "text")
        logger.debug(
            f"Claude usage: {response.usage.input_tokens} in, {response.usage.output_tokens} out"
        )

        return Generation(
            text=text,
            model=response.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )

    async def health_check(self, model: str) -> bool:
        """Check if Claude API is accessible."""
        try:
            response = await self.client.messages.create(
                model=model,
                max_tokens=10,
                messages=[{"role": "user", "content": "hi"}],
            )
            return bool(response.content)
        except Exception as e:
            logger.warning(f"Health check failed: {e}")
            return False

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            self._client = None
