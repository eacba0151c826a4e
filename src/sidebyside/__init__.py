"""
Sidebyside - one prompt, several language models, answers side by side.

Package structure:
- core: Aggregator, config, logging, shared types
- llm: Provider adapters, text generators and provider registry
- cli: Console presentation of aggregated responses
"""

__version__ = "0.1.0"
