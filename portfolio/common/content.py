"""
Built-in site content and loader.

The default content describes the portfolio subject; a JSON file with the
same shape (see SiteContent) can replace it at startup.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from .schemas import SiteContent

logger = logging.getLogger("portfolio.common.content")


DEFAULT_CONTENT = {
    "knowledge": {
        "personal": {
            "name": "Alemu Sisay Nigru",
            "title": "AI Researcher & Academic",
            "email": "alemu.nigru@unibs.it",
            "location": "Italy",
            "phone": "+39 3518443838",
            "linkedin": "linkedin.com/in/alemu-sisay",
            "github": "github.com/alexsisay",
        },
        "education": [
            {
                "degree": "PhD, Artificial Intelligence in Medicine",
                "institution": "University of Brescia",
                "year": "2022-2025",
                "focus": "Artificial Intelligence, Machine Learning, Medical Imaging",
            },
            {
                "degree": "MSc, Communication Technologies and Multimedia",
                "institution": "University of Brescia",
                "year": "2019-2022",
                "focus": "Multimedia Engineering, AI, Computer Vision",
            },
        ],
        "experience": [
            {
                "title": "AI Research Scientist",
                "company": "Research Institution",
                "period": "2022-Present",
                "description": "Leading research in AI and machine learning applications",
            },
            {
                "title": "Teaching Assistant",
                "company": "University",
                "period": "2020-2022",
                "description": "Assisted in teaching AI and computer science courses",
            },
        ],
        "skills": [
            "Machine Learning", "Deep Learning", "Python", "TensorFlow", "PyTorch",
            "Natural Language Processing", "Computer Vision", "Data Science",
            "Research Methodology", "Academic Writing",
        ],
        "publications": [
            {
                "title": "Advanced AI Applications in Healthcare",
                "journal": "AI Research Journal",
                "year": "2024",
                "doi": "10.1000/example",
            },
        ],
        "projects": [
            {
                "name": "AI-Powered Healthcare System",
                "description": "Developed machine learning models for disease prediction",
                "technologies": ["Python", "TensorFlow", "Scikit-learn"],
            },
        ],
    },
    "blog_posts": [
        {
            "id": 1,
            "title": "The Future of AI in Academic Research",
            "excerpt": "Exploring how artificial intelligence is transforming research methodologies across disciplines...",
            "content": (
                "Artificial Intelligence is revolutionizing the way we conduct academic research. "
                "From data analysis to literature reviews, AI tools are becoming indispensable for "
                "researchers worldwide. In this post, I'll share insights from my own research "
                "experience and discuss emerging trends in AI-powered academic workflows."
            ),
            "author": "Alemu Sisay Nigru",
            "date": "2024-01-15",
            "tags": ["AI", "Research", "Academic"],
        },
        {
            "id": 2,
            "title": "Machine Learning Applications in Healthcare",
            "excerpt": "A comprehensive overview of ML applications in modern healthcare systems...",
            "content": (
                "Healthcare is one of the most promising domains for machine learning applications. "
                "From diagnostic imaging to drug discovery, ML algorithms are helping medical "
                "professionals make better decisions and improve patient outcomes. This post "
                "explores current applications and future possibilities."
            ),
            "author": "Alemu Sisay Nigru",
            "date": "2024-01-10",
            "tags": ["ML", "Healthcare", "AI"],
        },
        {
            "id": 3,
            "title": "Building Effective AI Research Teams",
            "excerpt": "Lessons learned from leading AI research projects and managing diverse teams...",
            "content": (
                "Success in AI research often depends on having the right team composition and "
                "management approach. In this post, I share strategies for building effective AI "
                "research teams, including skill diversity, communication practices, and project "
                "management techniques."
            ),
            "author": "Alemu Sisay Nigru",
            "date": "2024-01-05",
            "tags": ["Leadership", "Research", "Team Management"],
        },
    ],
    "research_areas": ["AI", "ML", "Healthcare", "Education"],
    "years_of_experience": 5,
}


def default_content() -> SiteContent:
    return SiteContent.model_validate(DEFAULT_CONTENT)


def load_content(path: Optional[Union[str, Path]] = None) -> SiteContent:
    """
    Load site content from a JSON file, or the built-in content if no path.

    Args:
        path: JSON file shaped like DEFAULT_CONTENT

    Returns:
        Validated, frozen SiteContent

    Raises:
        FileNotFoundError: If path is given but missing
        ValueError: If the file is not valid JSON or fails validation
    """
    if not path:
        return default_content()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Content file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        content = SiteContent.model_validate(data)
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid content file {path}: {e}") from e

    logger.info(
        "Loaded content from %s (%d posts, %d projects)",
        path, len(content.blog_posts), len(content.knowledge.projects),
    )
    return content
