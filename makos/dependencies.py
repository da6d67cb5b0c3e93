from fastapi import Depends, Request

from makos.analytics import Gtag
from makos.services.auth_client import AuthClient
from makos.services.blog_service import BlogService, blog_service
from makos.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_auth_client(request: Request) -> AuthClient:
    return request.app.state.auth_client


def get_blog_service() -> BlogService:
    return blog_service


def get_gtag(
    request: Request, current_settings: Settings = Depends(get_settings)
) -> Gtag:
    gtag = getattr(request.state, "gtag", None)
    if gtag is None:
        gtag = Gtag(current_settings.GA_MEASUREMENT_ID or None)
        request.state.gtag = gtag
    return gtag
