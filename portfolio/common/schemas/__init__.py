"""
Portfolio Schemas

Immutable models for the knowledge context and the rest of the site content.
"""

from .profile import (
    KnowledgeContext,
    PersonalInfo,
    Education,
    Experience,
    Publication,
    Project,
)
from .content import BlogPost, SiteContent

__all__ = [
    "KnowledgeContext",
    "PersonalInfo",
    "Education",
    "Experience",
    "Publication",
    "Project",
    "BlogPost",
    "SiteContent",
]
