"""
Aggregator - fan a prompt out to every provider and join on all outcomes.

All adapter calls start before any is awaited. Each call's failure is turned
into an AIResponse inside its own task, so one provider failing never cancels
or delays another. Results come back in configuration order.
"""

import asyncio
import time

from sidebyside.core.logging import get_logger
from sidebyside.core.types import AIResponse, ProviderDescriptor
from sidebyside.llm.adapter import elapsed_ms
from sidebyside.llm.errors import ProviderCallError, ProviderError, UnknownError

logger = get_logger("core.aggregator")


def _as_provider_error(provider: str, exc: Exception) -> ProviderError:
    """Typed failure for an exception raised by an adapter."""
    if isinstance(exc, ProviderError) and str(exc):
        return exc
    if str(exc):
        return ProviderCallError(provider, str(exc))
    return UnknownError(provider)


class Aggregator:
    """Runs all configured providers concurrently for one prompt."""

    def __init__(self, providers: list[ProviderDescriptor]):
        names = [p.name for p in providers]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate provider names: {', '.join(duplicates)}")
        self._providers = list(providers)

    @property
    def providers(self) -> list[ProviderDescriptor]:
        return list(self._providers)

    async def generate(self, prompt: str) -> list[AIResponse]:
        """Query every provider and return one record per provider.

        Args:
            prompt: Passed to each adapter verbatim

        Returns:
            AIResponse list in configuration order, mixing successes and failures
        """
        start = time.perf_counter()
        logger.info(f"Aggregating {len(self._providers)} providers")

        async with asyncio.TaskGroup() as group:
            tasks = [
                group.create_task(self._settle(provider, prompt, start), name=provider.name)
                for provider in self._providers
            ]

        results = [task.result() for task in tasks]
        failed = [r.provider for r in results if not r.ok]
        logger.info(
            f"All providers settled in {elapsed_ms(start)} ms"
            + (f" (failed: {', '.join(failed)})" if failed else "")
        )
        return results

    async def _settle(self, provider: ProviderDescriptor, prompt: str, start: float) -> AIResponse:
        try:
            result = await provider.adapter(prompt)
            if not result.response:
                logger.warning(f"{provider.name} returned an empty response")
                return AIResponse.failed(provider.name, UnknownError(provider.name), elapsed_ms(start))
            # Malformed results (wrong type, negative time) fail here, inside the guard
            return AIResponse.success(provider.name, result)
        except Exception as e:
            failure = _as_provider_error(provider.name, e)
            logger.warning(f"{provider.name} failed: {failure}")
            return AIResponse.failed(provider.name, failure, elapsed_ms(start))

    async def close(self) -> None:
        """Close provider clients that hold connections.

        Every adapter is closed even if an earlier one fails to close.
        """
        for provider in self._providers:
            close = getattr(provider.adapter, "close", None)
            if close is None:
                continue
            try:
                await close()
            except Exception as e:
                logger.warning(f"Failed to close {provider.name}: {e}")


def create_default_aggregator() -> Aggregator:
    """Create aggregator with providers from settings."""
    from sidebyside.llm.registry import build_descriptors

    return Aggregator(build_descriptors())


async def generate_parallel_responses(prompt: str) -> list[AIResponse]:
    """One-shot aggregation over the configured providers."""
    aggregator = create_default_aggregator()
    try:
        return await aggregator.generate(prompt)
    finally:
        await aggregator.close()
