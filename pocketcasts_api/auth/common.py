"""Abstract class holding the Pocket Casts session."""

from __future__ import annotations

from abc import ABC, abstractmethod
import asyncio
from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Self

from pocketcasts_api.const import DEFAULT_REQUEST_TIMEOUT

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from pocketcasts_api.auth.models import PocketCastsSession, PocketCastsUserCredentials

_LOGGER = logging.getLogger(__name__)


@dataclass
class PocketCastsAuthClient(ABC):
    """Abstract base class holding the credentials used against the Pocket Casts API.

    Before login the holder carries the user's email and password; after a
    successful login it carries the issued session. The session is never
    refreshed, it is kept for the lifetime of the holder.
    """

    user_credentials: PocketCastsUserCredentials | None = None
    """(PocketCastsUserCredentials | None): User login details."""
    session: ClientSession | None = None
    """(ClientSession | None): The :class:`aiohttp.ClientSession` to use for the login request."""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    """Timeout for the login request in seconds."""

    _close_session: bool = False
    """Flag to determine if the session should be closed."""
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, init=False, repr=False)
    """Serializes logins against each other."""

    @abstractmethod
    async def authorize(self, user_credentials: PocketCastsUserCredentials) -> PocketCastsSession:
        """Log in and store the issued session.

        Args:
            user_credentials (PocketCastsUserCredentials): The user's login details.

        """
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    async def async_get_access_token(self) -> str:
        """Retrieve the session token to attach to authenticated requests.

        Raises:
            PocketCastsNoSessionError: If no login has succeeded yet.

        """
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    def get_credentials(self) -> dict | None:
        """Retrieve the current session as a dictionary, or None if not set."""
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    def set_credentials(self, credentials):
        """Set a new session.

        Args:
            credentials: The new session to be set.

        """
        raise NotImplementedError  # pragma: no cover

    @abstractmethod
    def invalidate_credentials(self):
        """Forget the current session."""
        raise NotImplementedError  # pragma: no cover

    @property
    def has_session(self) -> bool:
        """Whether a session is available for authenticated requests."""
        return self.get_credentials() is not None

    async def close(self) -> None:
        """Close open client session."""
        if self.session and self._close_session:
            await self.session.close()

    async def __aenter__(self) -> Self:
        """Async enter."""
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        """Async exit."""
        await self.close()
