"""Aggregation written as chained callbacks on futures.

Every step schedules a request, then hands its continuation to
`add_done_callback`. The continuation receives the previous step's value
explicitly and either schedules the next step or settles the outer future.

Rules:
- Must be called from a running event loop (it returns a pending future).
- The first failure settles the outer future; later callbacks become no-ops.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable

from core.domain.models import (
    AggregateResult,
    FilmRecord,
    PersonRecord,
    PlanetRecord,
)
from core.interfaces.fetcher import ResourceFetcher
from core.services.steps import decode_record, ensure_root_url, fetch_film, merge_result

LOGGER = logging.getLogger(__name__)


def aggregate_with_callbacks(
    fetcher: ResourceFetcher,
    root_url: str,
) -> asyncio.Future[AggregateResult]:
    loop = asyncio.get_running_loop()
    outcome: asyncio.Future[AggregateResult] = loop.create_future()

    def then(source: asyncio.Future[Any], on_success: Callable[[Any], None]) -> None:
        def callback(done: asyncio.Future[Any]) -> None:
            if done.cancelled():
                if not outcome.done():
                    outcome.cancel()
                return
            # Always read the exception so asyncio never reports it as unretrieved.
            exc = done.exception()
            if outcome.done():
                return
            if exc is not None:
                outcome.set_exception(exc)
                return
            try:
                on_success(done.result())
            except Exception as step_exc:
                if not outcome.done():
                    outcome.set_exception(step_exc)

        source.add_done_callback(callback)

    def get(url: str) -> asyncio.Future[Any]:
        return asyncio.ensure_future(fetcher.fetch_json(url))

    def on_person(body: Any) -> None:
        person = decode_record(PersonRecord, root_url, body)
        then(get(person.homeworld_url), lambda planet_body: on_planet(person, planet_body))

    def on_planet(person: PersonRecord, body: Any) -> None:
        planet = decode_record(PlanetRecord, person.homeworld_url, body)
        # Each film decodes in its own task, so a bad body fails as soon as it arrives.
        film_requests = asyncio.gather(
            *(asyncio.ensure_future(fetch_film(fetcher, url)) for url in person.film_urls)
        )
        then(film_requests, lambda films: on_films(person, planet, films))

    def on_films(person: PersonRecord, planet: PlanetRecord, films: list[FilmRecord]) -> None:
        result = merge_result(person, planet, films)
        LOGGER.info("Aggregated %s with %d films", result.name, len(result.films))
        outcome.set_result(result)

    try:
        ensure_root_url(root_url)
    except Exception as exc:
        outcome.set_exception(exc)
        return outcome

    LOGGER.info("Aggregating %s (callbacks)", root_url)
    then(get(root_url), on_person)
    return outcome
