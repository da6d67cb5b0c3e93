from typing import Mapping, Optional

from pydantic import BaseModel, field_validator


class AuthCallbackParams(BaseModel):
    """Query parameters the identity provider appends to its redirect."""

    code: Optional[str] = None
    error: Optional[str] = None
    error_description: Optional[str] = None

    @field_validator("code", "error", "error_description", mode="before")
    @classmethod
    def _blank_is_missing(cls, value):
        return value or None

    @classmethod
    def from_query(cls, query: Mapping[str, str]) -> "AuthCallbackParams":
        return cls(
            code=query.get("code"),
            error=query.get("error"),
            error_description=query.get("error_description"),
        )

    @property
    def error_message(self) -> Optional[str]:
        return self.error_description or self.error
