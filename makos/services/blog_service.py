import datetime
import logging
import math
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import frontmatter

from makos.schemas.blog import BlogPost

logger = logging.getLogger(__name__)

CONTENT_DIR = Path(__file__).resolve().parent.parent / "content" / "blog"
WORDS_PER_MINUTE = 200

_TAG_RE = re.compile(r"<[^>]+>")


def load_blog_posts(content_dir: Path = CONTENT_DIR) -> Tuple[BlogPost, ...]:
    """Read every post under ``content_dir`` in filename order.

    Each file is Markdown with YAML front matter; the body is the post's HTML.
    Raises ValueError if two posts share a slug.
    """
    posts = []
    seen = set()
    for path in sorted(content_dir.glob("*.md")):
        post = parse_post_file(path)
        if post.slug in seen:
            raise ValueError(f"Duplicate blog slug {post.slug!r} in {path.name}")
        seen.add(post.slug)
        posts.append(post)

    logger.debug(f"Loaded {len(posts)} blog posts from {content_dir}")
    return tuple(posts)


def parse_post_file(path: Path) -> BlogPost:
    parsed = frontmatter.load(str(path))
    metadata = parsed.metadata or {}
    content = parsed.content.strip()

    return BlogPost(
        slug=metadata.get("slug") or path.stem.split("-", 1)[-1],
        title=metadata["title"],
        excerpt=metadata.get("excerpt", ""),
        content=content,
        date=_convert_date(metadata["date"]),
        author=metadata.get("author", ""),
        image=metadata.get("image"),
        tags=[str(tag) for tag in metadata.get("tags", [])],
        readingTime=calculate_reading_time(strip_tags(content)),
    )


class BlogService:
    """Lookup and ordering over an immutable post catalogue."""

    def __init__(self, posts: Iterable[BlogPost]):
        self.posts = tuple(posts)

    def get_blog_post(self, slug: str) -> Optional[BlogPost]:
        return next((post for post in self.posts if post.slug == slug), None)

    def get_all_blog_posts(self) -> List[BlogPost]:
        # sorted() is stable with reverse=True, so same-day posts keep file order
        return sorted(self.posts, key=lambda post: post.date, reverse=True)


def _convert_date(value) -> str:
    if isinstance(value, (datetime.date, datetime.datetime)):
        return value.isoformat()
    return str(value)


def strip_tags(html: str) -> str:
    return _TAG_RE.sub(" ", html)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"


blog_service = BlogService(load_blog_posts())


def get_blog_post(slug: str) -> Optional[BlogPost]:
    return blog_service.get_blog_post(slug)


def get_all_blog_posts() -> List[BlogPost]:
    return blog_service.get_all_blog_posts()
