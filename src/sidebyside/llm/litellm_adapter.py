"""LiteLLM generator - unified client for OpenAI, Gemini and other hosted models."""

import litellm
from litellm import acompletion

from sidebyside.core.logging import get_logger
from sidebyside.llm.base import Generation, GeneratorKind, TextGenerator

logger = get_logger("llm.litellm_adapter")

# Disable LiteLLM's verbose logging
litellm.suppress_debug_info = True


class LiteLLMGenerator(TextGenerator):
    """Generator backed by ``litellm.acompletion``.

    Model names use LiteLLM routing prefixes, e.g. ``openai/gpt-4o-mini`` or
    ``gemini/gemini-1.5-flash``.
    """

    kind = GeneratorKind.LITELLM

    def __init__(self, api_key: str | None = None, api_base: str | None = None):
        self.api_key = api_key or None
        self.api_base = api_base or None

    async def generate(self, prompt: str, model: str, max_tokens: int) -> Generation:
        params = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
        }
        if self.api_key:
            params["api_key"] = self.api_key
        if self.api_base:
            params["api_base"] = self.api_base

        logger.debug(f"LiteLLM request: model={model}, max_tokens={max_tokens}")

        try:
            response = await acompletion(**params)
        except Exception as e:
            logger.error(f"LiteLLM error for {model}: {e}")
            raise

        content = response.choices[0].message.content or ""
        usage = getattr(response, "usage", None)
        input_tokens = usage.prompt_tokens if usage else 0
        output_tokens = usage.completion_tokens if usage else 0

        logger.debug(f"LiteLLM response: model={response.model}, tokens={input_tokens}+{output_tokens}")

        return Generation(
            text=content,
            model=response.model or model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
        )

    async def health_check(self, model: str) -> bool:
        """Minimal completion to verify credentials and connectivity."""
        try:
            generation = await self.generate("hi", model, max_tokens=5)
            return bool(generation.text)
        except Exception as e:
            logger.warning(f"Health check failed for {model}: {e}")
            return False
