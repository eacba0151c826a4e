"""Prompt checks applied by callers before aggregation."""


class EmptyPromptError(ValueError):
    """Prompt is empty or whitespace only."""


def validate_prompt(prompt: str | None) -> str:
    """Return the prompt unchanged, or raise EmptyPromptError."""
    if prompt is None or not prompt.strip():
        raise EmptyPromptError("Prompt must not be empty")
    return prompt
