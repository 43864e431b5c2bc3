from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

import pytest

from pocketcasts_api.auth import PocketCastsDefaultAuthClient
from pocketcasts_api.auth.models import PocketCastsSession, PocketCastsUserCredentials
from pocketcasts_api.client import PocketCastsClient

from .helpers import load_fixture_json

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

_LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.DEBUG)


@pytest.fixture
async def pocketcasts_client(default_credentials, user_credentials):
    """Return PocketCastsClient."""

    @contextlib.asynccontextmanager
    async def _pocketcasts_client(
        credentials: PocketCastsSession | None = None,
        load_default_credentials: bool = True,
        load_default_user_credentials: bool = False,
    ) -> AsyncGenerator[PocketCastsClient, None]:
        user_creds = user_credentials if load_default_user_credentials is True else None
        auth_client = PocketCastsDefaultAuthClient(user_credentials=user_creds)
        if credentials is not None:
            auth_client.set_credentials(credentials)
        elif load_default_credentials:
            auth_client.set_credentials(default_credentials)
        async with PocketCastsClient(auth_client=auth_client) as client:
            yield client

    return _pocketcasts_client


@pytest.fixture
async def pocketcasts_default_auth_client(user_credentials, default_credentials):
    """Return PocketCastsDefaultAuthClient."""

    @contextlib.asynccontextmanager
    async def _pocketcasts_auth_client(
        credentials: PocketCastsSession | None = None,
        load_default_credentials: bool = False,
        load_default_user_credentials: bool = True,
    ) -> AsyncGenerator[PocketCastsDefaultAuthClient, None]:
        auth_client = PocketCastsDefaultAuthClient()

        if load_default_user_credentials:
            auth_client.user_credentials = user_credentials
        if credentials is not None:
            auth_client.set_credentials(credentials)
        elif load_default_credentials:
            auth_client.set_credentials(default_credentials)

        async with auth_client:
            yield auth_client

    return _pocketcasts_auth_client


@pytest.fixture
def user_credentials():
    return PocketCastsUserCredentials(email="testuser@example.com", password="hunter2")


@pytest.fixture
def default_credentials():
    return PocketCastsSession.from_dict(load_fixture_json("login"))
