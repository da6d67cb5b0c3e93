from types import SimpleNamespace

from supabase import AuthError

from makos.services.auth_client import AuthResult


class FakeAuthError(AuthError):
    """AuthError with a predictable constructor across SDK releases."""

    def __init__(self, message: str):
        Exception.__init__(self, message)
        self.message = message


class FakeSessionAuth:
    """
    Request-bound auth stand-in for CallbackHandler and router tests.
    Records every call so tests can assert on how often the provider was hit.
    """

    def __init__(
        self,
        exchange_result=None,
        session_result=None,
        exchange_exc=None,
        authorize_url="https://auth.example.com/authorize",
        authorize_exc=None,
        storage=None,
    ):
        self.exchange_result = exchange_result or AuthResult()
        self.session_result = session_result or AuthResult()
        self.exchange_exc = exchange_exc
        self.authorize_url = authorize_url
        self.authorize_exc = authorize_exc
        self.storage = storage
        self.exchange_calls = []
        self.session_calls = 0
        self.sign_in_calls = []

    def exchange_code_for_session(self, code: str) -> AuthResult:
        self.exchange_calls.append(code)
        if self.exchange_exc:
            raise self.exchange_exc
        if self.storage is not None and self.exchange_result.session:
            self.storage.remove_item("supabase.auth.token-code-verifier")
            self.storage.set_item("supabase.auth.token", '{"access_token": "at"}')
        return self.exchange_result

    def get_session(self) -> AuthResult:
        self.session_calls += 1
        return self.session_result

    def sign_in_with_oauth(self, provider: str, redirect_to: str) -> str:
        self.sign_in_calls.append((provider, redirect_to))
        if self.authorize_exc:
            raise self.authorize_exc
        if self.storage is not None:
            self.storage.set_item("supabase.auth.token-code-verifier", "verifier-123")
        return self.authorize_url


class FakeAuthClient:
    """
    Process-wide auth client stand-in. ``bind`` hands back the same
    FakeSessionAuth, wired to the request's cookie storage.
    """

    def __init__(self, session_auth: FakeSessionAuth):
        self.session_auth = session_auth
        self.bound_storages = []

    def bind(self, storage):
        self.bound_storages.append(storage)
        self.session_auth.storage = storage
        return self.session_auth


class FakeGoTrue:
    """
    Minimal stand-in for ``Client.auth`` of the Supabase SDK.
    """

    def __init__(
        self, exchange_response=None, session=None, exc=None, oauth_url=None
    ):
        self.exchange_response = exchange_response
        self.session = session
        self.exc = exc
        self.oauth_url = oauth_url
        self.calls = []

    def exchange_code_for_session(self, params):
        self.calls.append(("exchange_code_for_session", params))
        if self.exc:
            raise self.exc
        return self.exchange_response

    def get_session(self):
        self.calls.append(("get_session", None))
        if self.exc:
            raise self.exc
        return self.session

    def sign_in_with_oauth(self, credentials):
        self.calls.append(("sign_in_with_oauth", credentials))
        if self.exc:
            raise self.exc
        return SimpleNamespace(provider=credentials["provider"], url=self.oauth_url)


class FakeSupabase:
    def __init__(self, auth: FakeGoTrue):
        self.auth = auth
