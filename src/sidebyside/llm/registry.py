"""
Provider registry.

Loads the ordered provider list from YAML and builds one adapter per entry.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from sidebyside.core.config import Settings, get_settings
from sidebyside.core.logging import get_logger
from sidebyside.core.types import ProviderDescriptor
from sidebyside.llm.adapter import DEFAULT_MAX_TOKENS, ProviderAdapter
from sidebyside.llm.base import GeneratorKind, TextGenerator

logger = get_logger("llm.registry")

DEFAULT_PROVIDERS_FILE = Path(__file__).parent.parent / "configs" / "providers.yaml"


@dataclass
class ProviderSpec:
    """One provider entry from the registry file."""

    name: str
    model: str
    kind: GeneratorKind = GeneratorKind.LITELLM
    credential: str | None = None  # Settings field holding the API key
    base_url: str | None = None
    max_tokens: int | None = None
    timeout: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProviderSpec":
        for key in ("name", "model"):
            if not data.get(key):
                raise ValueError(f"Provider entry missing '{key}': {data}")

        kind_value = data.get("kind", GeneratorKind.LITELLM.value)
        try:
            kind = GeneratorKind(kind_value)
        except ValueError:
            known = ", ".join(k.value for k in GeneratorKind)
            raise ValueError(f"Unknown provider kind '{kind_value}' (expected one of: {known})") from None

        return cls(
            name=str(data["name"]),
            model=str(data["model"]),
            kind=kind,
            credential=data.get("credential"),
            base_url=data.get("base_url"),
            max_tokens=data.get("max_tokens"),
            timeout=data.get("timeout"),
        )


def parse_provider_specs(data: dict[str, Any]) -> list[ProviderSpec]:
    """Validate a loaded registry document.

    Names are display identities and must be unique.
    """
    entries = data.get("providers") if data else None
    if not entries:
        raise ValueError("Provider registry contains no providers")

    specs = [ProviderSpec.from_dict(entry) for entry in entries]

    seen: set[str] = set()
    for spec in specs:
        if spec.name in seen:
            raise ValueError(f"Duplicate provider name: {spec.name}")
        seen.add(spec.name)

    return specs


def load_provider_specs(path: Path | str | None = None) -> list[ProviderSpec]:
    """Load provider specs from YAML, defaulting to the packaged list."""
    path = Path(path) if path else DEFAULT_PROVIDERS_FILE
    if not path.exists():
        raise FileNotFoundError(f"Provider registry not found at {path}")

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    specs = parse_provider_specs(data)
    logger.info(f"Loaded {len(specs)} providers from {path}: {', '.join(s.name for s in specs)}")
    return specs


def _resolve_credential(spec: ProviderSpec, settings: Settings) -> str | None:
    if not spec.credential:
        return None
    if not hasattr(settings, spec.credential):
        raise ValueError(f"Provider {spec.name}: unknown credential setting '{spec.credential}'")
    value = getattr(settings, spec.credential)
    if not value:
        logger.warning(f"Provider {spec.name}: {spec.credential} is not set")
    return value or None


def build_generator(spec: ProviderSpec, settings: Settings) -> TextGenerator:
    """Instantiate the generator for a spec's kind."""
    api_key = _resolve_credential(spec, settings)

    if spec.kind == GeneratorKind.LITELLM:
        from sidebyside.llm.litellm_adapter import LiteLLMGenerator

        return LiteLLMGenerator(api_key=api_key, api_base=spec.base_url)

    if spec.kind == GeneratorKind.ANTHROPIC:
        from sidebyside.llm.claude import ClaudeGenerator

        return ClaudeGenerator(api_key=api_key)

    from sidebyside.llm.openai_compat import OpenAICompatGenerator

    return OpenAICompatGenerator(base_url=spec.base_url or settings.local_llm_url, api_key=api_key)


def build_adapter(spec: ProviderSpec, settings: Settings) -> ProviderAdapter:
    """Wrap a spec's generator with its name, model and limits."""
    return ProviderAdapter(
        name=spec.name,
        model=spec.model,
        generator=build_generator(spec, settings),
        max_tokens=spec.max_tokens or settings.max_tokens or DEFAULT_MAX_TOKENS,
        timeout=spec.timeout if spec.timeout is not None else settings.provider_timeout,
    )


def build_descriptors(
    settings: Settings | None = None,
    specs: list[ProviderSpec] | None = None,
) -> list[ProviderDescriptor]:
    """Build aggregator descriptors from settings and the registry file."""
    settings = settings or get_settings()
    if specs is None:
        specs = load_provider_specs(settings.providers_file)

    descriptors = []
    for spec in specs:
        adapter = build_adapter(spec, settings)
        descriptors.append(ProviderDescriptor(name=spec.name, model=spec.model, adapter=adapter))
    return descriptors
