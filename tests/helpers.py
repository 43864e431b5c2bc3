from __future__ import annotations

from pathlib import Path

from aiohttp.web_response import json_response
from aresponses import ResponsesMockServer
import orjson
from yarl import URL

from pocketcasts_api.const import LOGIN_URL

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    """Load a fixture."""
    path = FIXTURE_DIR / f"{name}.json"
    if not path.exists():  # pragma: no cover
        raise FileNotFoundError(f"Fixture {name} not found")
    return path.read_text(encoding="utf-8")


def load_fixture_json(name: str):
    """Load a fixture as JSON."""
    data = load_fixture(name)
    return orjson.loads(data)


def setup_login_mock(aresponses: ResponsesMockServer, response=None):
    """Register a response for the login endpoint (the login fixture by default)."""
    url = URL(LOGIN_URL)
    aresponses.add(
        url.host,
        url.path,
        "POST",
        response if response is not None else json_response(data=load_fixture_json("login")),
    )
