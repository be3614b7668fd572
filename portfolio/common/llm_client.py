"""
Provider adapters for text generation.

Each adapter wraps one external SDK (Google Gemini, OpenAI, Anthropic) behind
the same ``generate(prompt) -> ProviderResult`` call. Adapters make a single
attempt with their own request timeout and never raise: transport, auth and
quota errors come back as ``Failure``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Type, Union

from .config import PROVIDER_ALIASES, ProviderConfig

logger = logging.getLogger("portfolio.common.llm_client")


class FailureKind(str, Enum):
    """Why a provider attempt produced no text"""
    UNAVAILABLE = "unavailable"
    CALL_FAILED = "call_failed"
    TIMEOUT = "timeout"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class Success:
    text: str

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    reason: str
    kind: FailureKind = FailureKind.CALL_FAILED

    @property
    def ok(self) -> bool:
        return False


ProviderResult = Union[Success, Failure]


class ProviderError(Exception):
    """Base class for provider errors; ``kind`` is carried into Failure."""
    kind = FailureKind.CALL_FAILED


class ProviderUnavailable(ProviderError):
    kind = FailureKind.UNAVAILABLE


class ProviderCallFailed(ProviderError):
    kind = FailureKind.CALL_FAILED


class MalformedProviderResponse(ProviderError):
    kind = FailureKind.MALFORMED


class ProviderAdapter(ABC):
    """
    Abstract text-generation provider.

    Subclasses implement:
    - _create_client: build the SDK client (may raise ImportError)
    - _complete: one request returning raw text
    """

    name: str = ""
    package: str = ""

    def __init__(self, config: ProviderConfig) -> None:
        self._config = config
        self._client = None

        if not config.api_key:
            logger.info("%s API key not provided, provider unavailable", self.name)
            return
        try:
            self._client = self._create_client()
        except ImportError:
            logger.warning("%s package not installed", self.package)
        except Exception as e:
            logger.warning("Failed to initialize %s client: %s", self.name, e)

    @property
    def is_available(self) -> bool:
        return self._client is not None

    @property
    def model(self) -> str:
        return self._config.model

    @property
    def timeout(self) -> float:
        return self._config.timeout

    def generate(self, prompt: str) -> ProviderResult:
        """Run a single completion. Never raises."""
        try:
            if not self.is_available:
                raise ProviderUnavailable(f"{self.name} client is not available")
            text = self._complete(prompt)
        except ProviderError as e:
            return Failure(reason=str(e), kind=e.kind)
        except Exception as e:
            return Failure(reason=f"{type(e).__name__}: {e}", kind=FailureKind.CALL_FAILED)

        if not isinstance(text, str) or not text.strip():
            return Failure(reason=f"{self.name} returned an empty response", kind=FailureKind.MALFORMED)
        return Success(text=text.strip())

    @abstractmethod
    def _create_client(self):
        pass

    @abstractmethod
    def _complete(self, prompt: str) -> str:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self.model!r}, available={self.is_available})"


class GeminiProvider(ProviderAdapter):
    name = "gemini"
    package = "google-generativeai"

    def _create_client(self):
        import google.generativeai as genai

        genai.configure(api_key=self._config.api_key)
        return genai.GenerativeModel(model_name=self._config.model)

    def _complete(self, prompt: str) -> str:
        response = self._client.generate_content(
            prompt,
            generation_config={
                "max_output_tokens": self._config.max_tokens,
                "temperature": self._config.temperature,
            },
            request_options={"timeout": self._config.timeout},
        )
        try:
            return response.text
        except (ValueError, AttributeError, IndexError) as e:
            # Blocked or empty candidates surface as ValueError from .text
            raise MalformedProviderResponse(f"gemini response has no text: {e}") from e


class OpenAIProvider(ProviderAdapter):
    name = "openai"
    package = "openai"

    def _create_client(self):
        from openai import OpenAI

        return OpenAI(api_key=self._config.api_key)

    def _complete(self, prompt: str) -> str:
        response = self._client.chat.completions.create(
            model=self._config.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            timeout=self._config.timeout,
        )
        try:
            return response.choices[0].message.content or ""
        except (AttributeError, IndexError, TypeError) as e:
            raise MalformedProviderResponse(f"openai response has no choices: {e}") from e


class AnthropicProvider(ProviderAdapter):
    name = "anthropic"
    package = "anthropic"

    def _create_client(self):
        import anthropic

        return anthropic.Anthropic(api_key=self._config.api_key)

    def _complete(self, prompt: str) -> str:
        response = self._client.messages.create(
            model=self._config.model,
            max_tokens=self._config.max_tokens,
            temperature=self._config.temperature,
            messages=[{"role": "user", "content": prompt}],
            timeout=self._config.timeout,
        )
        try:
            return response.content[0].text
        except (AttributeError, IndexError, TypeError) as e:
            raise MalformedProviderResponse(f"anthropic response has no text block: {e}") from e


_PROVIDERS: Dict[str, Type[ProviderAdapter]] = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
}


def create_provider(config: ProviderConfig) -> ProviderAdapter:
    """
    Build the adapter for ``config.name``.

    Raises:
        ValueError: If the provider name is not supported
    """
    canonical = PROVIDER_ALIASES.get((config.name or "").lower())
    if canonical is None:
        raise ValueError(f"Unsupported AI provider: {config.name}")
    return _PROVIDERS[canonical](config)
