"""
Portfolio Common Module

Shared infrastructure: configuration, site content and provider adapters.
"""

from .config import PortfolioConfig, LLMConfig, ProviderConfig, load_config
from .content import load_content, default_content
from .llm_client import (
    ProviderAdapter,
    ProviderResult,
    Success,
    Failure,
    FailureKind,
    create_provider,
)

__all__ = [
    "PortfolioConfig",
    "LLMConfig",
    "ProviderConfig",
    "load_config",
    "load_content",
    "default_content",
    "ProviderAdapter",
    "ProviderResult",
    "Success",
    "Failure",
    "FailureKind",
    "create_provider",
]
