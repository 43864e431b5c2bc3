"""Init file for pocketcasts_api."""

from pocketcasts_api.auth import PocketCastsDefaultAuthClient
from pocketcasts_api.auth.models import PocketCastsSession, PocketCastsUserCredentials
from pocketcasts_api.client import (
    PocketCastsClient,
)
from pocketcasts_api.models import (
    PocketCastsDiscoverPodcast,
    PocketCastsEpisode,
    PocketCastsPodcast,
    PocketCastsPodcastDetail,
    PocketCastsSearchPodcast,
)

__all__ = [
    "PocketCastsClient",
    "PocketCastsDefaultAuthClient",
    "PocketCastsDiscoverPodcast",
    "PocketCastsEpisode",
    "PocketCastsPodcast",
    "PocketCastsPodcastDetail",
    "PocketCastsSearchPodcast",
    "PocketCastsSession",
    "PocketCastsUserCredentials",
]
