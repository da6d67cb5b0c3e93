import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request

from makos import dependencies as deps
from makos.schemas.blog import BlogPost, BlogPostSummary
from makos.services.blog_service import BlogService
from makos.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/blog/posts", response_model=List[BlogPostSummary])
def list_posts(service: BlogService = Depends(deps.get_blog_service)):
    """Get all posts metadata, newest first."""
    try:
        return [post.summary() for post in service.get_all_blog_posts()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/api/blog/posts/{slug}", response_model=BlogPost)
def get_post(slug: str, service: BlogService = Depends(deps.get_blog_service)):
    """Get a single post by slug."""
    try:
        post = service.get_blog_post(slug)
        if not post:
            raise HTTPException(status_code=404, detail="Post not found")
        return post
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")


@router.get("/blog")
def blog_index(request: Request, service: BlogService = Depends(deps.get_blog_service)):
    posts = list_posts(service)
    return render(
        request,
        "blog/index.html",
        {"posts": posts, "page_title": "Blog | Makos.ai"},
    )


@router.get("/blog/{slug}")
def blog_post(
    slug: str,
    request: Request,
    service: BlogService = Depends(deps.get_blog_service),
):
    post = get_post(slug, service)
    return render(
        request,
        "blog/post.html",
        {
            "post": post,
            "page_title": f"{post.title} | Makos.ai Blog",
            "page_description": post.excerpt,
        },
    )
