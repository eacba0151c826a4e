"""OpenAI-compatible generator - OpenRouter, Ollama, LM Studio, vLLM."""

import httpx

from sidebyside.core.logging import get_logger
from sidebyside.llm.base import Generation, GeneratorKind, TextGenerator

logger = get_logger("llm.openai_compat")


class OpenAICompatGenerator(TextGenerator):
    """Plain HTTP client for ``/chat/completions`` style endpoints."""

    kind = GeneratorKind.OPENAI_COMPAT

    def __init__(self, base_url: str, api_key: str | None = None, timeout: float = 120.0):
        self.base_url = base_url
        self.api_key = api_key
        self.timeout = timeout
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            headers = {"X-Title": "Sidebyside"}
            if self.api_key:
                headers["Authorization"] = f"Bearer {self.api_key}"
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                headers=headers,
                timeout=self.timeout,
            )
        return self._client

    async def generate(self, prompt: str, model: str, max_tokens: int) -> Generation:
        payload = {
            "model": model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "stream": False,
        }

        logger.debug(f"OpenAI-compatible request: model={model}, url={self.base_url}")

        try:
            response = await self.client.post("/chat/completions", json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"HTTP error from {self.base_url}: {e.response.status_code} - {e.response.text}")
            raise
        except httpx.HTTPError as e:
            logger.warning(f"{self.base_url} not reachable: {e}")
            raise

        data = response.json()
        content = data["choices"][0]["message"].get("content") or ""
        usage = data.get("usage") or {}

        return Generation(
            text=content,
            model=data.get("model", model),
            input_tokens=usage.get("prompt_tokens", 0),
            output_tokens=usage.get("completion_tokens", 0),
        )

    async def health_check(self, model: str) -> bool:
        """Check that the server lists its models."""
        try:
            response = await self.client.get("/models")
            return response.status_code == 200
        except Exception as e:
            logger.debug(f"Health check failed for {self.base_url}: {e}")
            return False

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None
