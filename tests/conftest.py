from __future__ import annotations

import asyncio
import copy
from typing import Any

import httpx
import pytest

from adapters.http_client import HttpResourceFetcher, build_async_client
from core.config import AppSettings
from core.errors import FetchError

PERSON_URL = "https://swapi.test/api/people/1/"
PLANET_URL = "https://swapi.test/api/planets/1/"
FILM_1_URL = "https://swapi.test/api/films/1/"
FILM_2_URL = "https://swapi.test/api/films/2/"

LUKE = {
    "name": "Luke Skywalker",
    "height": "172",
    "mass": "77",
    "gender": "male",
    "homeworld": PLANET_URL,
    "films": [FILM_1_URL, FILM_2_URL],
    "starships": ["https://swapi.test/api/starships/12/"],
}
TATOOINE = {"name": "Tatooine", "climate": "arid", "population": "200000"}
A_NEW_HOPE = {
    "title": "A New Hope",
    "episode_id": 4,
    "director": "George Lucas",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1977-05-25",
}
EMPIRE = {
    "title": "The Empire Strikes Back",
    "episode_id": 5,
    "director": "Irvin Kershner",
    "producer": "Gary Kurtz, Rick McCallum",
    "release_date": "1980-05-17",
}

EXPECTED_LUKE = {
    "name": "Luke Skywalker",
    "height": "172",
    "gender": "male",
    "homeworld": "Tatooine",
    "films": [
        {"title": "A New Hope", "director": "George Lucas", "release_date": "1977-05-25"},
        {
            "title": "The Empire Strikes Back",
            "director": "Irvin Kershner",
            "release_date": "1980-05-17",
        },
    ],
}


class FakeApi:
    """In-memory upstream API served through `httpx.MockTransport`.

    - `routes`: URL -> JSON body (a `str` body is sent verbatim as text).
    - `statuses`: URL -> status code override.
    - `delays`: URL -> seconds to sleep before answering.
    - `broken`: URLs that raise a connection error.
    """

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = copy.deepcopy(routes)
        self.statuses: dict[str, int] = {}
        self.delays: dict[str, float] = {}
        self.broken: set[str] = set()
        self.events: list[tuple[str, str]] = []
        self.headers: list[httpx.Headers] = []

    @property
    def requested(self) -> list[str]:
        return [url for event, url in self.events if event == "start"]

    async def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.events.append(("start", url))
        self.headers.append(request.headers)
        delay = self.delays.get(url)
        if delay:
            await asyncio.sleep(delay)
        self.events.append(("end", url))

        if url in self.broken:
            raise httpx.ConnectError("connection refused", request=request)
        if url not in self.routes:
            return httpx.Response(404, json={"detail": "Not found"})
        status = self.statuses.get(url, 200)
        body = self.routes[url]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


async def fetch_with(api: FakeApi, coro_factory):
    """Open a client on `api`, build a fetcher and run `coro_factory(fetcher)`."""

    async with build_async_client(AppSettings(), transport=api.transport()) as client:
        return await coro_factory(HttpResourceFetcher(client))


class DictFetcher:
    """`ResourceFetcher` without HTTP: serves bodies from a dict."""

    def __init__(self, bodies: dict[str, Any]) -> None:
        self.bodies = bodies
        self.calls: list[str] = []

    async def fetch_json(self, url: str) -> Any:
        self.calls.append(url)
        await asyncio.sleep(0)
        if url not in self.bodies:
            raise FetchError(url, status_code=404)
        return copy.deepcopy(self.bodies[url])


@pytest.fixture
def luke_routes() -> dict[str, Any]:
    return {
        PERSON_URL: LUKE,
        PLANET_URL: TATOOINE,
        FILM_1_URL: A_NEW_HOPE,
        FILM_2_URL: EMPIRE,
    }


@pytest.fixture
def api(luke_routes: dict[str, Any]) -> FakeApi:
    return FakeApi(luke_routes)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep developer env vars and .env files out of the tests."""

    for key in (
        "HOLOCRON_API_BASE_URL",
        "HOLOCRON_DEFAULT_PERSON_PATH",
        "HOLOCRON_DEFAULT_STYLE",
        "HOLOCRON_LOG_LEVEL",
        "HOLOCRON_HTTP_TIMEOUT_SECONDS",
        "HOLOCRON_USER_AGENT",
    ):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
