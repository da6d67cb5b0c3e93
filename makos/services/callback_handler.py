import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol
from urllib.parse import urlencode

from makos.schemas.auth import AuthCallbackParams
from makos.services.auth_client import AuthResult

logger = logging.getLogger(__name__)

HOME_PATH = "/"
LOGIN_PATH = "/login"
CALLBACK_HANDLE_PATH = "/auth/callback/handle"

NO_CODE_MESSAGE = "No authentication code found"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"


def resolve_callback_redirect(params: AuthCallbackParams) -> str:
    """Where the provider's redirect should send the browser next."""
    if params.error:
        return f"{LOGIN_PATH}?{urlencode({'error': params.error_message})}"
    if params.code:
        return f"{CALLBACK_HANDLE_PATH}?{urlencode({'code': params.code})}"
    return HOME_PATH


class CallbackState(str, Enum):
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class Navigation:
    location: str
    delay_seconds: int = 0

    @property
    def immediate(self) -> bool:
        return self.delay_seconds <= 0


@dataclass(frozen=True)
class CallbackOutcome:
    state: CallbackState
    error: Optional[str] = None
    navigation: Optional[Navigation] = None


class SessionAuth(Protocol):
    def exchange_code_for_session(self, code: str) -> AuthResult: ...

    def get_session(self) -> AuthResult: ...


class CallbackHandler:
    """
    Completes sign-in for one view of the callback page.

    ``run`` resolves the view once. Later calls return the recorded outcome
    without touching the auth client again.
    """

    def __init__(self, auth: SessionAuth, redirect_delay_seconds: int = 2):
        self.auth = auth
        self.redirect_delay_seconds = redirect_delay_seconds
        self.outcome = CallbackOutcome(state=CallbackState.PROCESSING)

    @property
    def state(self) -> CallbackState:
        return self.outcome.state

    def run(self, params: AuthCallbackParams) -> CallbackOutcome:
        if self.state is not CallbackState.PROCESSING:
            return self.outcome

        try:
            self.outcome = self._resolve(params)
        except Exception:
            logger.exception("Callback error")
            self.outcome = self._failed(UNEXPECTED_ERROR_MESSAGE)
        return self.outcome

    def _resolve(self, params: AuthCallbackParams) -> CallbackOutcome:
        if params.error:
            logger.warning(f"Auth provider returned error: {params.error}")
            return self._failed(params.error_message)

        if params.code:
            result = self.auth.exchange_code_for_session(params.code)
            if result.error:
                return self._failed(result.error)
            if result.session:
                return self._succeeded()

        result = self.auth.get_session()
        if result.error:
            return self._failed(result.error)
        if result.session:
            return self._succeeded()
        return self._failed(NO_CODE_MESSAGE)

    def _succeeded(self) -> CallbackOutcome:
        return CallbackOutcome(
            state=CallbackState.SUCCESS, navigation=Navigation(HOME_PATH)
        )

    def _failed(self, message: str) -> CallbackOutcome:
        return CallbackOutcome(
            state=CallbackState.FAILED,
            error=message,
            navigation=Navigation(LOGIN_PATH, self.redirect_delay_seconds),
        )
