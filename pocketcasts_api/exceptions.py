"""pocketcasts_api exceptions."""

from __future__ import annotations


class PocketCastsApiError(Exception):
    """Generic Pocket Casts exception."""


class PocketCastsHttpStatusError(PocketCastsApiError):
    """Pocket Casts responded with an unexpected HTTP status."""

    def __init__(self, status: int, message: str | None = None) -> None:
        self.status = status
        super().__init__(message or f"Invalid HTTP status code: {status}")


class PocketCastsEmptyResponseError(PocketCastsApiError):
    """Pocket Casts returned an envelope without a result."""


class PocketCastsConnectionError(PocketCastsApiError):
    """Pocket Casts connection exception."""


class PocketCastsConnectionTimeoutError(PocketCastsConnectionError):
    """Pocket Casts connection timeout exception."""


class PocketCastsAuthenticationError(PocketCastsApiError):
    """Pocket Casts authentication exception."""


class PocketCastsInvalidCredentialsError(PocketCastsAuthenticationError):
    """The login was rejected by Pocket Casts."""


class PocketCastsMissingSessionError(PocketCastsAuthenticationError):
    """The login succeeded, but no session token could be read from the response."""


class PocketCastsNoSessionError(PocketCastsAuthenticationError):
    """An authenticated request was attempted before a successful login."""
