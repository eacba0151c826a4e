"""
Integration tests against live provider APIs.

Run with: pytest -m integration
Requires: .env with API keys
"""

import pytest

from sidebyside.core.aggregator import Aggregator
from sidebyside.core.config import get_settings
from sidebyside.llm.registry import build_descriptors, load_provider_specs

# Mark all tests in this module as integration tests
pytestmark = pytest.mark.integration


@pytest.fixture
def settings():
    return get_settings()


@pytest.mark.asyncio
async def test_default_providers_answer(settings):
    """Both default providers answer a trivial prompt."""
    if not (settings.openai_api_key and settings.google_api_key):
        pytest.skip("SIDEBYSIDE_OPENAI_API_KEY / SIDEBYSIDE_GOOGLE_API_KEY not set")

    aggregator = Aggregator(build_descriptors(settings))
    try:
        responses = await aggregator.generate("Say 'test ok' and nothing else.")
    finally:
        await aggregator.close()

    assert [r.provider for r in responses] == ["OpenAI", "Google AI"]
    for r in responses:
        assert r.ok, r.error
        print(f"{r.provider}: {r.response} ({r.response_time} ms)")


@pytest.mark.asyncio
async def test_bad_key_is_reported_not_raised(settings):
    """An invalid credential surfaces as an attributed error record."""
    settings = settings.model_copy(update={"openai_api_key": "sk-invalid", "google_api_key": "invalid"})
    specs = load_provider_specs()

    aggregator = Aggregator(build_descriptors(settings, specs))
    try:
        responses = await aggregator.generate("hello")
    finally:
        await aggregator.close()

    assert responses[0].error.startswith("OpenAI API Error:")
    assert responses[1].error.startswith("Google AI API Error:")
