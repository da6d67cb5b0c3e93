from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class BlogPostSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    slug: str
    title: str
    excerpt: str
    date: str
    author: str
    image: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    readingTime: Optional[str] = None


class BlogPost(BlogPostSummary):
    content: str

    def summary(self) -> BlogPostSummary:
        return BlogPostSummary(**self.model_dump(exclude={"content"}))
