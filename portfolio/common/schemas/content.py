"""
Site Content Schema

Everything the backend serves besides AI answers: the knowledge context,
blog posts and the highlights shown on the dashboard.
"""

from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .profile import KnowledgeContext


class BlogPost(BaseModel):
    """A single blog entry"""
    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    excerpt: str = ""
    content: str = ""
    author: str = ""
    date: str = Field(default="", description="Publication date (YYYY-MM-DD)")
    tags: Tuple[str, ...] = Field(default_factory=tuple)


class SiteContent(BaseModel):
    """Process-wide, read-only content bundle"""
    model_config = ConfigDict(frozen=True)

    knowledge: KnowledgeContext
    blog_posts: Tuple[BlogPost, ...] = Field(default_factory=tuple)
    research_areas: Tuple[str, ...] = Field(default_factory=tuple)
    years_of_experience: int = 0

    def get_post(self, post_id: int) -> Optional[BlogPost]:
        for post in self.blog_posts:
            if post.id == post_id:
                return post
        return None

    def dashboard(self) -> Dict[str, Any]:
        """Summary counters for the dashboard view"""
        return {
            "totalPublications": len(self.knowledge.publications),
            "totalProjects": len(self.knowledge.projects),
            "yearsOfExperience": self.years_of_experience,
            "blogPosts": len(self.blog_posts),
            "skills": len(self.knowledge.skills),
            "researchAreas": list(self.research_areas),
        }
