from .client import PocketCastsDefaultAuthClient
from .common import PocketCastsAuthClient
from .models import PocketCastsSession, PocketCastsUserCredentials

__all__ = [
    "PocketCastsAuthClient",
    "PocketCastsDefaultAuthClient",
    "PocketCastsSession",
    "PocketCastsUserCredentials",
]
