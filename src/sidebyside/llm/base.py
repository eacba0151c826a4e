"""
Text generator interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class GeneratorKind(Enum):
    LITELLM = "litellm"
    ANTHROPIC = "anthropic"
    OPENAI_COMPAT = "openai_compat"


@dataclass
class Generation:
    """Completed text from a remote model."""

    text: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0


class TextGenerator(ABC):
    """Abstract remote text-generation capability."""

    kind: GeneratorKind

    @abstractmethod
    async def generate(self, prompt: str, model: str, max_tokens: int) -> Generation:
        """
        Generate a completion for a single user prompt.

        Args:
            prompt: User prompt, passed verbatim
            model: Provider model identifier
            max_tokens: Upper bound on output tokens

        Returns:
            Generation with the completed text

        Raises:
            Whatever the underlying client raises; adapters attribute it.
        """
        ...

    @abstractmethod
    async def health_check(self, model: str) -> bool:
        """Check if the remote model is reachable."""
        ...

    async def close(self) -> None:
        """Release client resources."""
