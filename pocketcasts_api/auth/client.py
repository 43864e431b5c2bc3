from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from http import HTTPStatus
import logging
import socket
from typing import TYPE_CHECKING

from aiohttp import ClientError, ClientResponse, ClientSession
from aiohttp.hdrs import METH_POST
import orjson
from yarl import URL

from pocketcasts_api.auth.common import PocketCastsAuthClient
from pocketcasts_api.auth.models import PocketCastsSession
from pocketcasts_api.const import LOGIN_SCOPE, LOGIN_URL, POCKETCASTS_API_USER_AGENT
from pocketcasts_api.exceptions import (
    PocketCastsConnectionError,
    PocketCastsConnectionTimeoutError,
    PocketCastsHttpStatusError,
    PocketCastsInvalidCredentialsError,
    PocketCastsMissingSessionError,
    PocketCastsNoSessionError,
)

if TYPE_CHECKING:
    from pocketcasts_api.auth.models import PocketCastsUserCredentials

_LOGGER = logging.getLogger(__name__)


@dataclass
class PocketCastsDefaultAuthClient(PocketCastsAuthClient):
    """Default authentication client for Pocket Casts.

    Logs in with a JSON body and keeps the returned token, which is sent as a
    bearer token with every authenticated request.
    """

    credentials: PocketCastsSession | dict | str | None = None
    """(PocketCastsSession | dict | str | None): An earlier session, or its bare token."""

    _credentials: PocketCastsSession | None = field(default=None, init=False)

    def __post_init__(self):
        """Initialize the client after dataclass initialization."""
        if self.credentials is not None:
            self.set_credentials(self.credentials)

    @property
    def request_header(self) -> dict[str, str]:
        """Generate a header for HTTP requests to the server."""
        return {
            "Accept": "application/json",
            "User-Agent": POCKETCASTS_API_USER_AGENT,
        }

    async def _request(
        self,
        url: str | URL,
        method: str = METH_POST,
        **kwargs,
    ) -> ClientResponse:
        """Make a login request to the Pocket Casts server.

        Args:
            url (str | URL): The URL of the endpoint.
            method (str, optional): The HTTP method to use. Defaults to METH_POST.
            **kwargs: Additional keyword arguments for the request, such as ``json`` or ``headers``.

        Returns:
            ClientResponse: The response, with its body already read.

        Raises:
            PocketCastsConnectionTimeoutError: If a timeout occurs during the request.
            PocketCastsConnectionError: For other communication errors.

        """
        url = URL(url)
        headers = {
            **self.request_header,
            **kwargs.get("headers", {}),
        }
        kwargs.update({"headers": headers})

        if self.session is None or self.session.closed:
            self.session = ClientSession()
            _LOGGER.debug("New session created.")
            self._close_session = True

        _LOGGER.debug("Executing %s API request to %s.", method, url)

        try:
            async with asyncio.timeout(self.request_timeout):
                response = await self.session.request(
                    method,
                    url,
                    **kwargs,
                )
                await response.read()
        except asyncio.TimeoutError as exception:
            raise PocketCastsConnectionTimeoutError(
                "Timeout occurred while trying to log in to Pocket Casts"
            ) from exception
        except (ClientError, socket.gaierror) as exception:
            msg = f"Error occurred while communicating with the Pocket Casts API: {exception}"
            raise PocketCastsConnectionError(msg) from exception

        return response

    async def async_get_access_token(self) -> str:
        """Get the session token.

        Returns:
            str: The token.

        Raises:
            PocketCastsNoSessionError: If no login has succeeded yet.

        """
        if self._credentials is None:
            raise PocketCastsNoSessionError("Not logged in to Pocket Casts")
        return self._credentials.token

    async def authorize(self, user_credentials: PocketCastsUserCredentials) -> PocketCastsSession:
        """Log in and obtain a session.

        The obtained session is internally stored in the client. On failure the
        previously stored session (if any) is left untouched.

        Args:
            user_credentials (PocketCastsUserCredentials): The user's credentials.

        Raises:
            PocketCastsInvalidCredentialsError: If Pocket Casts rejects the email/password.
            PocketCastsHttpStatusError: If the login responds with any other non-success status.
            PocketCastsMissingSessionError: If the response carries no token.
            PocketCastsConnectionTimeoutError: If a timeout occurs during the request.
            PocketCastsConnectionError: For other communication errors.

        """
        async with self._lock:
            try:
                response = await self._request(
                    LOGIN_URL,
                    json={
                        "email": user_credentials.email,
                        "password": user_credentials.password,
                        "scope": LOGIN_SCOPE,
                    },
                )
            finally:
                await self.close()

            if response.status == HTTPStatus.UNAUTHORIZED:
                raise PocketCastsInvalidCredentialsError("Invalid Pocket Casts credentials")
            if response.status // 100 != 2:
                raise PocketCastsHttpStatusError(response.status)

            body = await response.read()
            data = orjson.loads(body) if body else None
            if not isinstance(data, dict) or not data.get("token"):
                raise PocketCastsMissingSessionError("No session token in the login response")

            self.set_credentials(PocketCastsSession.from_dict(data))
            self.user_credentials = user_credentials

        _LOGGER.debug("Login successful")

        return self._credentials

    def get_credentials(self) -> dict | None:
        """Get the current session as a dictionary, or None if not set."""
        if self._credentials is not None:
            return self._credentials.to_dict()
        return None

    def set_credentials(self, credentials: PocketCastsSession | dict | str):
        """Set the session.

        Args:
            credentials (PocketCastsSession | dict | str): The session to set, either as a
                model, a dictionary, its JSON representation, or a bare token.

        """
        if isinstance(credentials, PocketCastsSession):
            self._credentials = credentials
        elif isinstance(credentials, dict):
            self._credentials = PocketCastsSession.from_dict(credentials)
        else:
            try:
                data = orjson.loads(credentials)
            except orjson.JSONDecodeError:
                data = None
            if isinstance(data, dict):
                self._credentials = PocketCastsSession.from_dict(data)
            else:
                self._credentials = PocketCastsSession(token=credentials)

    def invalidate_credentials(self):
        """Forget the current session."""
        self._credentials = None
