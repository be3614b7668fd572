"""
Portfolio Assistant

Answers visitor questions about the portfolio subject.

Components:
- ResponderPipeline: primary provider, then secondary, then fallback
- FallbackResponder: ordered keyword rules over the knowledge context
- build_prompt: instruction template + knowledge snapshot + question
"""

from .fallback import FallbackResponder, FallbackRule, FALLBACK_RULES
from .pipeline import ResponderPipeline, PipelineStatus
from .prompt import build_prompt, ASSISTANT_PROMPT

__all__ = [
    "FallbackResponder",
    "FallbackRule",
    "FALLBACK_RULES",
    "ResponderPipeline",
    "PipelineStatus",
    "build_prompt",
    "ASSISTANT_PROMPT",
]
