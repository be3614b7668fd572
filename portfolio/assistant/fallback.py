"""
Fallback Responder

Deterministic keyword matcher used when no provider is configured or every
provider attempt failed.

Rules are checked in a fixed order and the first match wins:
research/focus, education/degree, skill/expertise, contact/email,
publication/paper, project. A question matching none of them gets a generic
pointer to the contact email.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from ..common.schemas import KnowledgeContext


def _join(items: Iterable[str]) -> str:
    items = [i for i in items if i]
    if len(items) <= 1:
        return "".join(items)
    return ", ".join(items[:-1]) + f", and {items[-1]}"


def _research(ctx: KnowledgeContext) -> str:
    name = ctx.name
    if not ctx.education:
        title = ctx.personal.title or "researcher"
        return f"{name} works as a {title}. Ask about skills or projects for more detail."
    current = ctx.education[0]
    answer = f"{name}'s research focuses on {current.focus or current.degree}."
    answer += f" Most recent degree: {current.degree}, {current.institution}"
    if current.year:
        answer += f" ({current.year})"
    return answer + "."


def _education(ctx: KnowledgeContext) -> str:
    if not ctx.education:
        return f"No education details are listed for {ctx.name} yet."
    entries = [
        f"{e.degree}, {e.institution}" + (f" ({e.year})" if e.year else "")
        for e in ctx.education
    ]
    return f"{ctx.name}'s education: " + "; ".join(entries) + "."


def _skills(ctx: KnowledgeContext) -> str:
    if not ctx.skills:
        return f"No skills are listed for {ctx.name} yet."
    return f"{ctx.name}'s technical skills include {_join(ctx.skills)}."


def _contact(ctx: KnowledgeContext) -> str:
    p = ctx.personal
    answer = f"You can contact {p.name} at {p.email}" if p.email else f"You can reach {p.name}"
    if p.linkedin:
        answer += f" or through LinkedIn at {p.linkedin}"
    answer += "."
    if p.location:
        answer += f" {p.name} is based in {p.location} and available for research collaborations."
    return answer


def _publications(ctx: KnowledgeContext) -> str:
    if not ctx.publications:
        return f"No publications are listed for {ctx.name} yet."
    entries = [
        f'"{p.title}"' + (f" ({', '.join(x for x in (p.journal, p.year) if x)})" if p.journal or p.year else "")
        for p in ctx.publications
    ]
    return f"{ctx.name}'s publications include {_join(entries)}."


def _projects(ctx: KnowledgeContext) -> str:
    if not ctx.projects:
        return f"No projects are listed for {ctx.name} yet."
    entries = []
    for p in ctx.projects:
        entry = p.name
        if p.description:
            entry += f" ({p.description})"
        if p.technologies:
            entry += f" built with {_join(p.technologies)}"
        entries.append(entry)
    return f"{ctx.name} has worked on {_join(entries)}."


def _generic(ctx: KnowledgeContext) -> str:
    answer = (
        "I apologize, but I'm having trouble accessing my knowledge base right now. "
        f"Please try asking about {ctx.name}'s research focus, education, skills, "
        "publications, or contact information."
    )
    if ctx.email:
        answer += f" You can also reach out directly at {ctx.email}."
    return answer


@dataclass(frozen=True)
class FallbackRule:
    """Keywords (lowercase) mapped to an answer rendered from the context"""
    name: str
    keywords: Tuple[str, ...]
    render: Callable[[KnowledgeContext], str]

    def matches(self, lowered_question: str) -> bool:
        return any(k in lowered_question for k in self.keywords)


FALLBACK_RULES: Tuple[FallbackRule, ...] = (
    FallbackRule("research", ("research", "focus"), _research),
    FallbackRule("education", ("education", "degree"), _education),
    FallbackRule("skills", ("skill", "expertise"), _skills),
    FallbackRule("contact", ("contact", "email"), _contact),
    FallbackRule("publications", ("publication", "paper"), _publications),
    FallbackRule("projects", ("project",), _projects),
)


class FallbackResponder:
    """Ordered first-match keyword responder. Stateless; safe to share."""

    def __init__(self, rules: Tuple[FallbackRule, ...] = FALLBACK_RULES):
        self._rules = tuple(rules)

    @property
    def rules(self) -> Tuple[FallbackRule, ...]:
        return self._rules

    def match_rule(self, question: str) -> Optional[FallbackRule]:
        """Return the first matching rule, or None."""
        lowered = (question or "").lower()
        for rule in self._rules:
            if rule.matches(lowered):
                return rule
        return None

    def match(self, question: str, knowledge: KnowledgeContext) -> str:
        rule = self.match_rule(question)
        if rule is None:
            return _generic(knowledge)
        return rule.render(knowledge)
