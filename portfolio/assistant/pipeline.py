"""
Responder Pipeline

Maps a visitor question to an answer string.

Resolution order:
1. Primary provider (if configured)
2. Secondary provider (if configured)
3. Keyword fallback responder

Each provider attempt runs on a worker thread and is awaited with a bounded
wait, so a hanging provider cannot stall the request. Every failure kind
(unavailable, call failed, timeout, malformed) is logged and converted into
the next step of the chain; ``resolve`` never raises.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..common.config import LLMConfig
from ..common.llm_client import (
    Failure,
    FailureKind,
    ProviderAdapter,
    ProviderResult,
    Success,
    create_provider,
)
from ..common.schemas import KnowledgeContext
from .fallback import FallbackResponder
from .prompt import build_prompt

logger = logging.getLogger("portfolio.assistant.pipeline")

# Extra wait on top of the adapter's own request timeout
ATTEMPT_GRACE_SECONDS = 5.0


@dataclass(frozen=True)
class PipelineStatus:
    """Provider availability snapshot for health endpoints"""
    provider: str
    provider_configured: bool
    using_fallback: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "providerConfigured": self.provider_configured,
            "usingFallback": self.using_fallback,
        }


class ResponderPipeline:
    """
    Short-circuit chain of providers ending in the fallback responder.

    The pipeline holds no mutable per-request state; concurrent ``resolve``
    calls share the knowledge context, adapters and executor read-only.
    """

    def __init__(
        self,
        knowledge: KnowledgeContext,
        primary: Optional[ProviderAdapter] = None,
        secondary: Optional[ProviderAdapter] = None,
        fallback: Optional[FallbackResponder] = None,
        attempt_timeout: Optional[float] = None,
        max_workers: int = 8,
    ):
        """
        Args:
            knowledge: Context injected into prompts and fallback answers
            primary: First provider to try
            secondary: Provider tried when the primary fails
            fallback: Keyword responder (default rules if omitted)
            attempt_timeout: Bounded wait per provider attempt in seconds.
                Defaults to the adapter's own timeout plus a grace period.
            max_workers: Worker threads for provider calls
        """
        self._knowledge = knowledge
        self._chain: List[ProviderAdapter] = [p for p in (primary, secondary) if p is not None]
        self._fallback = fallback or FallbackResponder()
        self._attempt_timeout = attempt_timeout
        self._executor: Optional[ThreadPoolExecutor] = None
        if self._chain:
            self._executor = ThreadPoolExecutor(
                max_workers=max_workers, thread_name_prefix="provider"
            )

    @classmethod
    def from_config(
        cls,
        llm_config: LLMConfig,
        knowledge: KnowledgeContext,
        **kwargs,
    ) -> "ResponderPipeline":
        """Build adapters for the configured providers and wire the chain."""
        primary_cfg = llm_config.primary()
        secondary_cfg = llm_config.secondary()

        primary = create_provider(primary_cfg) if primary_cfg else None
        secondary = create_provider(secondary_cfg) if secondary_cfg else None

        if primary is None and secondary is None:
            logger.info("No AI provider configured, using fallback responses")
        else:
            logger.info(
                "AI providers: primary=%s secondary=%s",
                primary_cfg.name if primary_cfg else "-",
                secondary_cfg.name if secondary_cfg else "-",
            )
        return cls(knowledge, primary=primary, secondary=secondary, **kwargs)

    @property
    def knowledge(self) -> KnowledgeContext:
        return self._knowledge

    @property
    def providers(self) -> List[ProviderAdapter]:
        return list(self._chain)

    def status(self) -> PipelineStatus:
        available = [p for p in self._chain if p.is_available]
        return PipelineStatus(
            provider=available[0].name if available else "fallback",
            provider_configured=bool(available),
            using_fallback=not available,
        )

    def resolve(self, question: str) -> str:
        """Answer ``question``. Always returns non-empty text."""
        if self._chain:
            prompt = build_prompt(question, self._knowledge)
            for adapter in self._chain:
                result = self._attempt(adapter, prompt)
                if result.ok:
                    return result.text

        return self._fallback.match(question, self._knowledge)

    def _attempt(self, adapter: ProviderAdapter, prompt: str) -> ProviderResult:
        """Run one provider call under a bounded wait, converting every error to Failure."""
        wait = self._attempt_timeout
        if wait is None:
            wait = adapter.timeout + ATTEMPT_GRACE_SECONDS

        start = time.monotonic()
        try:
            future = self._executor.submit(adapter.generate, prompt)
            result = future.result(timeout=wait)
        except FutureTimeout:
            # Drop the call if it is still queued behind busy workers
            future.cancel()
            result = Failure(reason=f"no response within {wait:.1f}s", kind=FailureKind.TIMEOUT)
        except Exception as e:
            result = Failure(reason=f"{type(e).__name__}: {e}", kind=FailureKind.CALL_FAILED)

        if not isinstance(result, (Success, Failure)):
            result = Failure(
                reason=f"unexpected result type {type(result).__name__}",
                kind=FailureKind.MALFORMED,
            )
        elif isinstance(result, Success) and (
            not isinstance(result.text, str) or not result.text.strip()
        ):
            result = Failure(reason="empty or non-text response", kind=FailureKind.MALFORMED)

        elapsed = time.monotonic() - start
        if result.ok:
            logger.info("Provider %s answered in %.2fs", adapter.name, elapsed)
        else:
            logger.warning(
                "Provider %s failed after %.2fs (%s): %s",
                adapter.name, elapsed, result.kind.value, result.reason,
            )
        return result

    def close(self) -> None:
        """Release worker threads without waiting on in-flight calls."""
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = None

    def __enter__(self) -> "ResponderPipeline":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
