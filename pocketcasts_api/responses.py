"""Response envelopes wrapping the Pocket Casts payloads."""

from __future__ import annotations

from dataclasses import dataclass

from pocketcasts_api.models import (
    BaseDataClassORJSONMixin,
    PocketCastsDiscoverPodcast,
    PocketCastsEpisode,
    PocketCastsPodcast,
    PocketCastsPodcastDetail,
    PocketCastsSearchPodcast,
)


@dataclass(frozen=True)
class SubscriptionsResponse(BaseDataClassORJSONMixin):
    podcasts: list[PocketCastsPodcast]


@dataclass(frozen=True)
class EpisodesResponsePodcast(BaseDataClassORJSONMixin):
    uuid: str
    episodes: list[PocketCastsEpisode]


@dataclass(frozen=True)
class EpisodesResponse(BaseDataClassORJSONMixin):
    podcast: EpisodesResponsePodcast
    episode_frequency: str | None = None
    has_more_episodes: bool | None = None


@dataclass(frozen=True)
class PodcastResponse(BaseDataClassORJSONMixin):
    podcast: PocketCastsPodcastDetail


@dataclass(frozen=True)
class SearchResponse(BaseDataClassORJSONMixin):
    podcasts: list[PocketCastsSearchPodcast]


@dataclass(frozen=True)
class DiscoverResult(BaseDataClassORJSONMixin):
    podcasts: list[PocketCastsDiscoverPodcast]


@dataclass(frozen=True)
class DiscoverResponse(BaseDataClassORJSONMixin):
    """Envelope of the static discovery feeds.

    ``result`` is absent when the feed has no content.
    """

    status: str
    result: DiscoverResult | None = None
