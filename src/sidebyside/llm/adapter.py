"""Provider adapter - one timed, attributed call to one provider."""

import asyncio
import time

from sidebyside.core.logging import get_logger
from sidebyside.core.types import AdapterResult
from sidebyside.llm.base import TextGenerator
from sidebyside.llm.errors import ProviderCallError

logger = get_logger("llm.adapter")

DEFAULT_MAX_TOKENS = 1000


def elapsed_ms(start: float) -> int:
    """Milliseconds since a ``time.perf_counter()`` reading."""
    return max(0, int((time.perf_counter() - start) * 1000))


class ProviderAdapter:
    """Wraps a generator for a fixed provider name and model.

    Calling the adapter issues exactly one remote request. Failures are
    re-raised as ProviderCallError so they stay attributable once merged
    with other providers' results.
    """

    def __init__(
        self,
        name: str,
        model: str,
        generator: TextGenerator,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float | None = None,
    ):
        self.name = name
        self.model = model
        self.generator = generator
        self.max_tokens = max_tokens
        self.timeout = timeout

    async def __call__(self, prompt: str) -> AdapterResult:
        logger.debug(f"{self.name}: calling {self.model} (max_tokens={self.max_tokens})")
        deadline = asyncio.timeout(self.timeout)
        start = time.perf_counter()
        try:
            async with deadline:
                generation = await self.generator.generate(prompt, self.model, self.max_tokens)
        except TimeoutError as e:
            if not deadline.expired():
                raise ProviderCallError(self.name, str(e)) from e
            logger.warning(f"{self.name}: no answer within {self.timeout}s")
            raise ProviderCallError(self.name, f"timed out after {self.timeout:g}s") from e
        except Exception as e:
            logger.warning(f"{self.name} call failed: {e}")
            raise ProviderCallError(self.name, str(e)) from e
        response_time = elapsed_ms(start)

        logger.debug(f"{self.name}: {len(generation.text)} chars in {response_time} ms")
        return AdapterResult(response=generation.text, response_time=response_time)

    async def health_check(self) -> bool:
        return await self.generator.health_check(self.model)

    async def close(self) -> None:
        await self.generator.close()
