"""
Knowledge Context Schema

The structured CV record describing the portfolio subject. It is injected
into every provider prompt and read directly by the fallback responder.

Models are frozen: a KnowledgeContext is built once at startup and shared
read-only across requests.
"""

from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PersonalInfo(_Frozen):
    """Identity and contact details"""
    name: str
    title: str = ""
    email: str = ""
    location: str = ""
    phone: str = ""
    linkedin: str = ""
    github: str = ""


class Education(_Frozen):
    degree: str
    institution: str
    year: str = ""
    focus: str = ""


class Experience(_Frozen):
    title: str
    company: str
    period: str = ""
    description: str = ""


class Publication(_Frozen):
    title: str
    journal: str = ""
    year: str = ""
    doi: str = ""


class Project(_Frozen):
    name: str
    description: str = ""
    technologies: Tuple[str, ...] = Field(default_factory=tuple)


class KnowledgeContext(_Frozen):
    """
    Read-only aggregate of the CV sections.

    Each section is an ordered tuple of records; order is preserved in
    prompts and fallback answers (most recent entries first by convention).
    """
    personal: PersonalInfo
    education: Tuple[Education, ...] = Field(default_factory=tuple)
    experience: Tuple[Experience, ...] = Field(default_factory=tuple)
    skills: Tuple[str, ...] = Field(default_factory=tuple)
    publications: Tuple[Publication, ...] = Field(default_factory=tuple)
    projects: Tuple[Project, ...] = Field(default_factory=tuple)

    @property
    def name(self) -> str:
        return self.personal.name

    @property
    def email(self) -> str:
        return self.personal.email

    def snapshot(self) -> Dict[str, Any]:
        """Plain JSON-ready copy of every section."""
        return self.model_dump(mode="json")
