"""Prompt assembly for provider calls."""

import json

from ..common.schemas import KnowledgeContext


ASSISTANT_PROMPT = """You are an AI assistant for {name}'s academic portfolio.
You have access to the following information about {name}:

Personal: {personal}
Education: {education}
Experience: {experience}
Skills: {skills}
Publications: {publications}
Projects: {projects}

Answer questions about {name}'s academic and professional background based on this information.
Be professional, concise, and helpful. If you don't have information about something, say so politely.

User question: {question}"""


def build_prompt(question: str, knowledge: KnowledgeContext) -> str:
    """Render the instruction template with a snapshot of the knowledge context."""
    snapshot = knowledge.snapshot()
    sections = {
        key: json.dumps(snapshot[key], ensure_ascii=False)
        for key in ("personal", "education", "experience", "skills", "publications", "projects")
    }
    return ASSISTANT_PROMPT.format(name=knowledge.name, question=question, **sections)
