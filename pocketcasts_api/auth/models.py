from __future__ import annotations

from dataclasses import dataclass

from pocketcasts_api.models import BaseDataClassORJSONMixin


@dataclass(frozen=True)
class PocketCastsUserCredentials:
    """Represents user's login details for Pocket Casts authentication."""

    email: str
    password: str

    def __repr__(self) -> str:
        return f"PocketCastsUserCredentials(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class PocketCastsSession(BaseDataClassORJSONMixin):
    """Represents the token issued by Pocket Casts after a successful login."""

    token: str
    uuid: str | None = None
    email: str | None = None
