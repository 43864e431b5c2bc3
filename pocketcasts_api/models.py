"""pocketcasts_api models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from mashumaro import field_options
from mashumaro.config import BaseConfig
from mashumaro.mixins.orjson import DataClassORJSONMixin

from pocketcasts_api.helpers import thumbnail_url_for


@dataclass(frozen=True)
class BaseDataClassORJSONMixin(DataClassORJSONMixin):
    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True
        allow_deserialization_not_by_alias = True


class _ThumbnailMixin:
    @property
    def thumbnail_url(self) -> str:
        """The podcast artwork URL, derived from the podcast uuid."""
        return thumbnail_url_for(self.uuid)


@dataclass(frozen=True)
class PocketCastsPodcast(_ThumbnailMixin, BaseDataClassORJSONMixin):
    """Represents a podcast the user is subscribed to."""

    uuid: str
    title: str
    author: str
    description: str
    url: str | None = None
    episodes_sort_order: int | None = field(default=None, metadata=field_options(alias="episodesSortOrder"))
    auto_start_from: int | None = field(default=None, metadata=field_options(alias="autoStartFrom"))
    last_episode_uuid: str | None = field(default=None, metadata=field_options(alias="lastEpisodeUuid"))
    last_episode_published: datetime | None = field(
        default=None, metadata=field_options(alias="lastEpisodePublished")
    )
    last_episode_playing_status: int | None = field(
        default=None, metadata=field_options(alias="lastEpisodePlayingStatus")
    )
    last_episode_archived: bool | None = field(
        default=None, metadata=field_options(alias="lastEpisodeArchived")
    )
    unplayed: bool | None = None
    folder_uuid: str | None = field(default=None, metadata=field_options(alias="folderUuid"))
    sort_position: int | None = field(default=None, metadata=field_options(alias="sortPosition"))
    date_added: datetime | None = field(default=None, metadata=field_options(alias="dateAdded"))


@dataclass(frozen=True)
class PocketCastsPodcastDetail(_ThumbnailMixin, BaseDataClassORJSONMixin):
    """Represents the full details of a single podcast."""

    uuid: str
    title: str
    author: str
    description: str
    url: str | None = None
    category: str | None = None
    audio: bool | None = None
    show_type: str | None = None


@dataclass(frozen=True)
class PocketCastsDiscoverPodcast(_ThumbnailMixin, BaseDataClassORJSONMixin):
    """Represents a podcast listed in one of the discovery feeds."""

    uuid: str
    title: str
    author: str | None = None
    description: str | None = None
    url: str | None = None


@dataclass(frozen=True)
class PocketCastsSearchPodcast(PocketCastsDiscoverPodcast):
    """Represents a podcast search result."""


@dataclass(frozen=True)
class PocketCastsEpisode(BaseDataClassORJSONMixin):
    """Represents a podcast episode."""

    uuid: str
    file_size: int
    file_type: str
    title: str
    url: str
    duration: int
    published: datetime | None = None
