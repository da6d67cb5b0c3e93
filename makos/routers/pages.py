from fastapi import APIRouter, Depends, Request

from makos import dependencies as deps
from makos.services.blog_service import BlogService
from makos.templating import render

router = APIRouter()

LATEST_POSTS_ON_HOME = 3


@router.get("/")
def home(request: Request, service: BlogService = Depends(deps.get_blog_service)):
    latest = service.get_all_blog_posts()[:LATEST_POSTS_ON_HOME]
    return render(request, "home.html", {"latest_posts": latest})
