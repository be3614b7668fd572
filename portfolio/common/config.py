"""
Configuration Management for the Portfolio Backend

Loads configuration from ~/.portfolio/config.json and environment variables.
"""

import os
import json
import logging
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger("portfolio.common.config")

# Default config paths
CONFIG_DIR = Path.home() / ".portfolio"
CONFIG_PATH = Path(os.getenv("PORTFOLIO_CONFIG", str(CONFIG_DIR / "config.json")))

# Provider name aliases accepted in config and env
PROVIDER_ALIASES = {
    "gemini": "gemini",
    "google": "gemini",
    "openai": "openai",
    "anthropic": "anthropic",
}


@dataclass(frozen=True)
class ProviderConfig:
    """Settings for a single text-generation provider. Built once, never mutated."""
    name: str
    api_key: str
    model: str
    max_tokens: int = 300
    temperature: float = 0.7
    timeout: float = 30.0

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks
        return f"ProviderConfig(name={self.name!r}, model={self.model!r}, timeout={self.timeout})"


@dataclass
class LLMConfig:
    """Generative-AI provider configuration"""
    provider: str = "gemini"
    secondary_provider: str = ""
    google_api_key: str = ""
    google_model: str = "gemini-2.0-flash"
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 300
    temperature: float = 0.7
    timeout: float = 30.0

    def provider_config(self, name: str) -> Optional[ProviderConfig]:
        """Build the ProviderConfig for ``name``, or None if it has no credential."""
        canonical = PROVIDER_ALIASES.get((name or "").strip().lower())
        if canonical is None:
            if name:
                logger.warning("Unknown AI provider %r, ignoring", name)
            return None

        api_key, model = {
            "gemini": (self.google_api_key, self.google_model),
            "openai": (self.openai_api_key, self.openai_model),
            "anthropic": (self.anthropic_api_key, self.anthropic_model),
        }[canonical]
        if not api_key:
            return None

        return ProviderConfig(
            name=canonical,
            api_key=api_key,
            model=model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            timeout=self.timeout,
        )

    def primary(self) -> Optional[ProviderConfig]:
        return self.provider_config(self.provider)

    def secondary(self) -> Optional[ProviderConfig]:
        primary = self.primary()
        secondary = self.provider_config(self.secondary_provider)
        if primary and secondary and primary.name == secondary.name:
            return None
        return secondary


@dataclass
class ServerConfig:
    """HTTP server configuration"""
    host: str = "0.0.0.0"
    port: int = 5000


@dataclass
class PortfolioConfig:
    """Main Portfolio configuration"""
    llm: LLMConfig = field(default_factory=LLMConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    content_path: str = ""  # JSON file overriding the built-in site content


def _parse_llm_config(data: dict) -> LLMConfig:
    """Parse llm section from config dict"""
    llm_data = data.get("llm", {})
    defaults = LLMConfig()
    return LLMConfig(
        provider=llm_data.get("provider", defaults.provider),
        secondary_provider=llm_data.get("secondary_provider", ""),
        google_api_key=llm_data.get("google_api_key", ""),
        google_model=llm_data.get("google_model", defaults.google_model),
        openai_api_key=llm_data.get("openai_api_key", ""),
        openai_model=llm_data.get("openai_model", defaults.openai_model),
        anthropic_api_key=llm_data.get("anthropic_api_key", ""),
        anthropic_model=llm_data.get("anthropic_model", defaults.anthropic_model),
        max_tokens=int(llm_data.get("max_tokens", defaults.max_tokens)),
        temperature=float(llm_data.get("temperature", defaults.temperature)),
        timeout=float(llm_data.get("timeout", defaults.timeout)),
    )


def _parse_server_config(data: dict) -> ServerConfig:
    """Parse server section from config dict"""
    server_data = data.get("server", {})
    return ServerConfig(
        host=server_data.get("host", "0.0.0.0"),
        port=int(server_data.get("port", 5000)),
    )


def load_config() -> PortfolioConfig:
    """
    Load configuration from file and environment variables.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (~/.portfolio/config.json, or $PORTFOLIO_CONFIG)
    3. Default values
    """
    config = PortfolioConfig()

    if CONFIG_PATH.exists():
        try:
            with open(CONFIG_PATH) as f:
                data = json.load(f)

            llm = _parse_llm_config(data)
            server = _parse_server_config(data)
            content_path = data.get("content_path") or ""
            config.llm, config.server, config.content_path = llm, server, content_path
        except (json.JSONDecodeError, IOError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config file %s: %s", CONFIG_PATH, e)

    _env_llm_map = {
        "AI_PROVIDER": "provider",
        "AI_SECONDARY_PROVIDER": "secondary_provider",
        "GOOGLE_API_KEY": "google_api_key",
        "GEMINI_API_KEY": "google_api_key",
        "GOOGLE_MODEL": "google_model",
        "OPENAI_API_KEY": "openai_api_key",
        "OPENAI_MODEL": "openai_model",
        "ANTHROPIC_API_KEY": "anthropic_api_key",
        "ANTHROPIC_MODEL": "anthropic_model",
    }
    for env_var, attr in _env_llm_map.items():
        val = os.getenv(env_var)
        if val:
            setattr(config.llm, attr, val)

    if os.getenv("AI_MAX_TOKENS"):
        config.llm.max_tokens = int(os.getenv("AI_MAX_TOKENS"))
    if os.getenv("AI_TEMPERATURE"):
        config.llm.temperature = float(os.getenv("AI_TEMPERATURE"))
    if os.getenv("AI_TIMEOUT"):
        config.llm.timeout = float(os.getenv("AI_TIMEOUT"))

    if os.getenv("HOST"):
        config.server.host = os.getenv("HOST")
    if os.getenv("PORT"):
        config.server.port = int(os.getenv("PORT"))

    if os.getenv("PORTFOLIO_CONTENT"):
        config.content_path = os.getenv("PORTFOLIO_CONTENT")

    return config
