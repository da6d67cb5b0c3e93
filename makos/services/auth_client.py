import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from supabase import AuthError, Client, create_client
from supabase.client import ClientOptions

from makos.services.cookie_storage import CookieStorage
from makos.settings import Settings

logger = logging.getLogger(__name__)


class AuthConfigError(RuntimeError):
    """Raised at startup when the hosted auth service is not configured."""


@dataclass(frozen=True)
class AuthResult:
    session: Optional[Any] = None
    error: Optional[str] = None


class AuthClient:
    """
    Process-wide handle on the hosted Supabase auth service.

    The SDK keeps the PKCE code verifier and the session in its storage, so
    every request gets its own SDK client bound to that request's cookies
    via ``bind``. Nothing user-specific lives on this object.
    """

    def __init__(
        self,
        url: str,
        anon_key: str,
        client_factory: Callable[..., Client] = create_client,
    ):
        if not url:
            raise AuthConfigError("Missing SUPABASE_URL")
        if not anon_key:
            raise AuthConfigError("Missing SUPABASE_ANON_KEY")
        self.url = url
        self.anon_key = anon_key
        self.client_factory = client_factory

    def bind(self, storage: CookieStorage) -> "BoundAuthClient":
        def build() -> Client:
            options = ClientOptions(
                storage=storage,
                flow_type="pkce",
                auto_refresh_token=False,
                persist_session=True,
            )
            return self.client_factory(self.url, self.anon_key, options=options)

        return BoundAuthClient(build)


class BoundAuthClient:
    """Auth operations for a single request.

    The SDK client is built on first use, so construction problems surface
    from the operation that needed it.
    """

    def __init__(self, build: Callable[[], Client]):
        self._build = build
        self._sdk: Optional[Client] = None

    @property
    def sdk(self) -> Client:
        if self._sdk is None:
            self._sdk = self._build()
        return self._sdk

    def exchange_code_for_session(self, code: str) -> AuthResult:
        try:
            response = self.sdk.auth.exchange_code_for_session({"auth_code": code})
        except AuthError as e:
            logger.warning(f"Code exchange rejected by auth provider: {e.message}")
            return AuthResult(error=e.message)
        return AuthResult(session=getattr(response, "session", None))

    def get_session(self) -> AuthResult:
        try:
            session = self.sdk.auth.get_session()
        except AuthError as e:
            logger.warning(f"Session lookup rejected by auth provider: {e.message}")
            return AuthResult(error=e.message)
        return AuthResult(session=session)

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> str:
        """Start the PKCE flow and return the provider's authorize URL."""
        response = self.sdk.auth.sign_in_with_oauth(
            {"provider": provider, "options": {"redirect_to": redirect_to}}
        )
        return response.url


def create_auth_client(settings: Settings) -> AuthClient:
    client = AuthClient(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)
    logger.info(f"Auth client configured for {settings.SUPABASE_URL}")
    return client
