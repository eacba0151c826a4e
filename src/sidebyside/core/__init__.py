"""
Core module - aggregation, configuration, shared types.

Components:
- config: Settings management via pydantic-settings
- types: Shared data structures (AIResponse, AdapterResult, ProviderDescriptor)
- aggregator: Concurrent fan-out to all configured providers
- logging: Structured logging setup
"""

from sidebyside.core.config import Settings
from sidebyside.core.types import AdapterResult, AIResponse, ProviderDescriptor

__all__ = ["Settings", "AIResponse", "AdapterResult", "ProviderDescriptor"]
