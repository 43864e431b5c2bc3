"""pocketcasts_api helper functions."""

from __future__ import annotations

from uuid import UUID

from pocketcasts_api.const import THUMBNAIL_URL_TEMPLATE


def thumbnail_url_for(uuid: str) -> str:
    """Get the artwork URL for a podcast.

    Artwork is served from a fixed CDN location, so no request is involved.

    Args:
        uuid (str): The uuid of the podcast.

    """
    return THUMBNAIL_URL_TEMPLATE.format(uuid=uuid)


def is_valid_uuid(value: str) -> bool:
    """Check whether a podcast or episode identifier is formatted as a UUID."""
    try:
        UUID(value)
    except (TypeError, ValueError, AttributeError):
        return False
    return True
