import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse
from supabase import AuthError

from makos import dependencies as deps
from makos.schemas.auth import AuthCallbackParams
from makos.services.auth_client import AuthClient
from makos.services.callback_handler import (
    CallbackHandler,
    CallbackState,
    resolve_callback_redirect,
)
from makos.services.cookie_storage import CookieStorage
from makos.settings import Settings
from makos.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/auth/callback")
def auth_callback(request: Request):
    """Receive the identity provider's redirect and hand off the code."""
    params = AuthCallbackParams.from_query(request.query_params)
    return RedirectResponse(resolve_callback_redirect(params))


@router.get("/auth/callback/handle")
def auth_callback_handle(
    request: Request,
    auth_client: AuthClient = Depends(deps.get_auth_client),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Exchange the authorization code for a session."""
    params = AuthCallbackParams.from_query(request.query_params)
    storage = CookieStorage(request.cookies, secure=current_settings.COOKIE_SECURE)
    handler = CallbackHandler(
        auth_client.bind(storage),
        redirect_delay_seconds=current_settings.AUTH_REDIRECT_DELAY_SECONDS,
    )
    outcome = handler.run(params)

    if outcome.state is CallbackState.SUCCESS:
        response = RedirectResponse(outcome.navigation.location)
    else:
        response = render(
            request,
            "auth/callback.html",
            {"outcome": outcome, "page_title": "Signing in | Makos.ai"},
        )
    return storage.apply(response)


@router.get("/login")
def login(
    request: Request,
    error: Optional[str] = None,
    current_settings: Settings = Depends(deps.get_settings),
):
    return render(
        request,
        "login.html",
        {
            "error": error,
            "providers": current_settings.AUTH_PROVIDERS,
            "page_title": "Log in | Makos.ai",
        },
    )


@router.get("/login/{provider}")
def login_with_provider(
    provider: str,
    request: Request,
    auth_client: AuthClient = Depends(deps.get_auth_client),
    current_settings: Settings = Depends(deps.get_settings),
):
    """Start the PKCE sign-in flow with an OAuth provider."""
    if provider not in current_settings.AUTH_PROVIDERS:
        raise HTTPException(status_code=404, detail="Unknown auth provider")

    storage = CookieStorage(request.cookies, secure=current_settings.COOKIE_SECURE)
    try:
        url = auth_client.bind(storage).sign_in_with_oauth(
            provider, current_settings.auth_callback_url
        )
    except AuthError as e:
        logger.warning(f"Could not start {provider} sign in: {e.message}")
        return render(
            request,
            "login.html",
            {
                "error": e.message,
                "providers": current_settings.AUTH_PROVIDERS,
                "page_title": "Log in | Makos.ai",
            },
        )
    except Exception as e:
        logger.error(f"Unexpected error starting {provider} sign in: {e}")
        raise HTTPException(status_code=500, detail="Failed to start sign in")

    return storage.apply(RedirectResponse(url))
