import base64
import logging
from typing import Dict, List, Mapping, Optional

from starlette.responses import Response

logger = logging.getLogger(__name__)

BASE64_PREFIX = "base64-"
MAX_CHUNK_SIZE = 3180
COOKIE_MAX_AGE = 400 * 24 * 60 * 60


class CookieStorage:
    """
    Auth SDK storage backed by the request's cookies.

    Reads come from the incoming cookies (plus anything written during this
    request). Writes are buffered and copied onto the outgoing response by
    ``apply``. Long values are split across ``<key>.0``, ``<key>.1``, ...
    """

    def __init__(self, cookies: Mapping[str, str], secure: bool = True):
        self.cookies: Dict[str, str] = dict(cookies)
        self.secure = secure
        self._set: Dict[str, str] = {}
        self._deleted: List[str] = []

    # Client options may be deep-copied; writes must land on this instance.
    def __deepcopy__(self, memo):
        return self

    def get_item(self, key: str) -> Optional[str]:
        raw = self.cookies.get(key)
        if raw is None:
            raw = self._read_chunks(key)
        if raw is None:
            return None
        return decode_value(raw)

    def set_item(self, key: str, value: str) -> None:
        self.remove_item(key)
        encoded = encode_value(value)
        if len(encoded) <= MAX_CHUNK_SIZE:
            self._write(key, encoded)
            return
        for index, start in enumerate(range(0, len(encoded), MAX_CHUNK_SIZE)):
            self._write(f"{key}.{index}", encoded[start : start + MAX_CHUNK_SIZE])

    def remove_item(self, key: str) -> None:
        names = [key] + [
            name for name in self.cookies if _is_chunk_of(name, key)
        ]
        for name in names:
            if name in self.cookies:
                del self.cookies[name]
                self._set.pop(name, None)
                self._deleted.append(name)

    def apply(self, response: Response) -> Response:
        for name in self._deleted:
            if name not in self._set:
                response.delete_cookie(
                    name, path="/", secure=self.secure, httponly=True, samesite="lax"
                )
        for name, value in self._set.items():
            response.set_cookie(
                name,
                value,
                max_age=COOKIE_MAX_AGE,
                path="/",
                secure=self.secure,
                httponly=True,
                samesite="lax",
            )
        return response

    def _write(self, name: str, value: str) -> None:
        self.cookies[name] = value
        self._set[name] = value

    def _read_chunks(self, key: str) -> Optional[str]:
        chunks = []
        index = 0
        while f"{key}.{index}" in self.cookies:
            chunks.append(self.cookies[f"{key}.{index}"])
            index += 1
        return "".join(chunks) if chunks else None


def _is_chunk_of(name: str, key: str) -> bool:
    prefix = f"{key}."
    return name.startswith(prefix) and name[len(prefix) :].isdigit()


def encode_value(value: str) -> str:
    encoded = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")
    return BASE64_PREFIX + encoded.rstrip("=")


def decode_value(raw: str) -> Optional[str]:
    if not raw.startswith(BASE64_PREFIX):
        return raw
    payload = raw[len(BASE64_PREFIX) :]
    try:
        padded = payload + "=" * (-len(payload) % 4)
        return base64.urlsafe_b64decode(padded).decode("utf-8")
    except ValueError as e:
        logger.warning(f"Discarding undecodable auth cookie: {e}")
        return None
