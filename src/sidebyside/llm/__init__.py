"""
LLM module - provider adapters and text generators.

Generators:
- litellm_adapter: OpenAI, Gemini and friends via LiteLLM (default)
- claude: Anthropic Claude API
- openai_compat: Any OpenAI-compatible endpoint (OpenRouter, Ollama, LM Studio)

Adapters wrap one generator each, time the call and attribute failures.
The registry turns the YAML provider list into adapters.
"""
