"""
Portfolio Backend

Serves static portfolio data (CV, blog posts, dashboard stats) and answers
visitor questions through a generative-AI provider, falling back to canned
keyword-matched answers when no provider is configured or every call fails.

Usage:
    from portfolio.common import load_config, load_content
    from portfolio.assistant import ResponderPipeline, FallbackResponder
"""

__version__ = "0.1.0"
