"""Pocket Casts API."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
import logging
import socket
from typing import TYPE_CHECKING, Any, Self

from aiohttp.client import ClientError, ClientSession
from aiohttp.hdrs import METH_GET, METH_POST
import orjson
from yarl import URL

from pocketcasts_api.auth import PocketCastsDefaultAuthClient, PocketCastsUserCredentials
from pocketcasts_api.const import (
    DEFAULT_REQUEST_TIMEOUT,
    EPISODES_PAGE_SUFFIX,
    EPISODES_URL_PREFIX,
    FEATURED_URL,
    PODCAST_URL,
    POCKETCASTS_API_USER_AGENT,
    SEARCH_PODCASTS_URL,
    SUBSCRIPTIONS_URL,
    TOP_CHARTS_URL,
    TRENDING_URL,
)
from pocketcasts_api.exceptions import (
    PocketCastsAuthenticationError,
    PocketCastsConnectionError,
    PocketCastsConnectionTimeoutError,
    PocketCastsEmptyResponseError,
    PocketCastsHttpStatusError,
)
from pocketcasts_api.models import PocketCastsPodcast
from pocketcasts_api.responses import (
    DiscoverResponse,
    EpisodesResponse,
    PodcastResponse,
    SearchResponse,
    SubscriptionsResponse,
)

if TYPE_CHECKING:
    from pocketcasts_api.auth import PocketCastsAuthClient, PocketCastsSession
    from pocketcasts_api.models import (
        PocketCastsDiscoverPodcast,
        PocketCastsEpisode,
        PocketCastsPodcastDetail,
        PocketCastsSearchPodcast,
    )

_LOGGER = logging.getLogger(__name__)


@dataclass
class PocketCastsClient:
    """A client for interacting with the Pocket Casts API.

    Every public coroutine performs exactly one HTTP request. Requests against
    user data need a session, obtained with :meth:`login`; the discovery feeds
    can be fetched without one.
    """

    auth_client: PocketCastsAuthClient = field(default_factory=PocketCastsDefaultAuthClient)
    """auth_client (PocketCastsAuthClient): Holder of the credentials and the session token."""

    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    """The timeout for API requests in seconds."""
    session: ClientSession | None = None
    """(ClientSession | None): The :class:`aiohttp.ClientSession` to use for API requests."""

    _close_session: bool = False

    def __post_init__(self):
        """Share the client session with the auth client, unless it has its own."""
        if self.session is not None and self.auth_client.session is None:
            self.auth_client.session = self.session

    @classmethod
    def with_user(cls, email: str, password: str, **kwargs) -> Self:
        """Create a client holding the given login details, ready for :meth:`login`."""
        auth_client = PocketCastsDefaultAuthClient(
            user_credentials=PocketCastsUserCredentials(email=email, password=password),
        )
        return cls(auth_client=auth_client, **kwargs)

    def _ensure_session(self):
        if self.session is None or self.session.closed:
            self.session = ClientSession()
            _LOGGER.debug("New session created.")
            self._close_session = True

    async def _request(
        self,
        url: str | URL,
        method: str = METH_GET,
        authenticated: bool = True,
        **kwargs,
    ) -> Any:
        """Make a request to the Pocket Casts API.

        Args:
            url (str | URL): The URL of the endpoint.
            method (str): The HTTP method to use for the request.
            authenticated (bool): Attach the session token to the request.
            **kwargs: Additional keyword arguments for the request.
                May include:
                - params (dict): Query parameters for the request.
                - json (dict): JSON data to send in the request body.
                - headers (dict): Additional headers for the request.

        Returns:
            The decoded JSON response body.

        Raises:
            PocketCastsNoSessionError: If the request is authenticated and no login has succeeded.
            PocketCastsHttpStatusError: If the response status is not 2xx.
            PocketCastsConnectionTimeoutError: If the request timed out.
            PocketCastsConnectionError: For other communication errors.

        """
        url = URL(url)
        headers = {
            **self.request_header,
            **kwargs.get("headers", {}),
        }
        if authenticated:
            access_token = await self.auth_client.async_get_access_token()
            headers.update({"Authorization": f"Bearer {access_token}"})
        kwargs.update({"headers": headers})

        _LOGGER.debug(
            "Executing %s API request to %s.",
            method,
            url.with_query(kwargs.get("params")),
        )
        self._ensure_session()

        try:
            async with asyncio.timeout(self.request_timeout):
                response = await self.session.request(
                    method,
                    url,
                    **kwargs,
                )
                contents = await response.read()
        except asyncio.TimeoutError as exception:
            raise PocketCastsConnectionTimeoutError(
                "Timeout occurred while connecting to the Pocket Casts API"
            ) from exception
        except (ClientError, socket.gaierror) as exception:
            raise PocketCastsConnectionError(
                "Error occurred while communicating with the Pocket Casts API"
            ) from exception

        if response.status // 100 != 2:
            raise PocketCastsHttpStatusError(
                response.status,
                f"Request to <{url}> failed with status {response.status}",
            )

        result = orjson.loads(contents)
        _LOGGER.debug("Response: %s", str(result))
        return result

    @property
    def request_header(self) -> dict[str, str]:
        """Generate a header for HTTP requests to the server."""
        return {
            "Accept": "application/json",
            "User-Agent": POCKETCASTS_API_USER_AGENT,
        }

    async def login(self, email: str | None = None, password: str | None = None) -> PocketCastsSession:
        """Log in to Pocket Casts.

        The issued session is stored and attached to every following request.

        Args:
            email (str | None): The account email. Defaults to the email held by the auth client.
            password (str | None): The account password. Defaults to the password held by the
                auth client.

        Raises:
            PocketCastsAuthenticationError: If no login details are available.
            PocketCastsInvalidCredentialsError: If the login details are rejected.
            PocketCastsMissingSessionError: If the login response carries no session token.
            PocketCastsHttpStatusError: If the login fails with another HTTP status.

        """
        stored = self.auth_client.user_credentials
        if email is None and stored is not None:
            email = stored.email
        if password is None and stored is not None:
            password = stored.password
        if email is None or password is None:
            raise PocketCastsAuthenticationError("No user credentials provided")
        user_credentials = PocketCastsUserCredentials(email=email, password=password)
        return await self.auth_client.authorize(user_credentials)

    async def get_subscriptions(self) -> list[PocketCastsPodcast]:
        """Get the podcasts the user is subscribed to."""
        data = await self._request(SUBSCRIPTIONS_URL, method=METH_POST, json={"v": 1})
        return SubscriptionsResponse.from_dict(data).podcasts

    async def get_episodes(self, podcast: PocketCastsPodcast | str) -> list[PocketCastsEpisode]:
        """Get the episodes of a podcast.

        Only the first page (of fixed size) is fetched.

        Args:
            podcast (PocketCastsPodcast | str): The podcast, or its uuid.

        """
        uuid = podcast.uuid if isinstance(podcast, PocketCastsPodcast) else podcast
        data = await self._request(f"{EPISODES_URL_PREFIX}/{uuid}/{EPISODES_PAGE_SUFFIX}")
        episodes = EpisodesResponse.from_dict(data).podcast.episodes
        _LOGGER.debug("Retrieved %d episodes for podcast %s", len(episodes), uuid)
        return episodes

    async def get_podcast(self, uuid: str) -> PocketCastsPodcastDetail:
        """Get the details of a podcast.

        Args:
            uuid (str): The uuid of the podcast.

        """
        data = await self._request(PODCAST_URL, method=METH_POST, json={"uuid": uuid})
        return PodcastResponse.from_dict(data).podcast

    async def search_podcasts(self, term: str) -> list[PocketCastsSearchPodcast]:
        """Search the Pocket Casts catalog.

        Args:
            term (str): The search term.

        """
        data = await self._request(SEARCH_PODCASTS_URL, method=METH_POST, json={"term": term})
        return SearchResponse.from_dict(data).podcasts

    async def get_top_charts(self) -> list[PocketCastsDiscoverPodcast]:
        """Get the most popular podcasts worldwide."""
        return await self._get_discover(TOP_CHARTS_URL)

    async def get_featured(self) -> list[PocketCastsDiscoverPodcast]:
        """Get the featured podcasts."""
        return await self._get_discover(FEATURED_URL)

    async def get_trending(self) -> list[PocketCastsDiscoverPodcast]:
        """Get the trending podcasts."""
        return await self._get_discover(TRENDING_URL)

    async def _get_discover(self, url: str) -> list[PocketCastsDiscoverPodcast]:
        data = await self._request(url, authenticated=False)
        response = DiscoverResponse.from_dict(data)
        if response.result is None:
            raise PocketCastsEmptyResponseError(f"No result in discovery feed <{url}>")
        return response.result.podcasts

    async def close(self) -> None:
        """Close open client sessions."""
        if self.session and self._close_session:
            await self.session.close()
        await self.auth_client.close()

    async def __aenter__(self) -> Self:
        """Async enter."""
        return self

    async def __aexit__(self, *_exc_info: object) -> None:
        """Async exit."""
        await self.close()
