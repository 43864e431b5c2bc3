"""pocketcasts_api constants."""

import logging

POCKETCASTS_API_USER_AGENT = "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:131.0) Gecko/20100101 Firefox/131.0"
POCKETCASTS_API_BASE_URL = "https://api.pocketcasts.com"
POCKETCASTS_CACHE_BASE_URL = "https://cache.pocketcasts.com"
POCKETCASTS_STATIC_BASE_URL = "https://static.pocketcasts.com"

LOGIN_URL = f"{POCKETCASTS_API_BASE_URL}/user/login"
SUBSCRIPTIONS_URL = f"{POCKETCASTS_API_BASE_URL}/user/podcast/list"
PODCAST_URL = f"{POCKETCASTS_API_BASE_URL}/podcasts/show"
SEARCH_PODCASTS_URL = f"{POCKETCASTS_API_BASE_URL}/discover/search"

EPISODES_URL_PREFIX = f"{POCKETCASTS_CACHE_BASE_URL}/podcast/full"
EPISODES_PAGE_SUFFIX = "0/3/1000"

TOP_CHARTS_URL = f"{POCKETCASTS_STATIC_BASE_URL}/discover/json/popular_world.json"
FEATURED_URL = f"{POCKETCASTS_STATIC_BASE_URL}/discover/json/featured.json"
TRENDING_URL = f"{POCKETCASTS_STATIC_BASE_URL}/discover/json/trending.json"

THUMBNAIL_URL_TEMPLATE = f"{POCKETCASTS_STATIC_BASE_URL}/discover/images/130/{{uuid}}.jpg"

LOGIN_SCOPE = "webplayer"

DEFAULT_REQUEST_TIMEOUT = 15

LOGGER = logging.getLogger(__package__)
