"""Aggregation written as composed reactive streams (reactivex).

Each fetch is a cold one-element observable. Steps are chained with
`flat_map`, and the film fan-out is a `fork_join` over one observable per
URL. Nothing is requested until the returned observable is subscribed or
awaited.
"""

from __future__ import annotations

import logging

import reactivex as rx
from reactivex import Observable
from reactivex import operators as ops

from core.domain.models import (
    AggregateResult,
    FilmRecord,
    PersonRecord,
    PlanetRecord,
)
from core.interfaces.fetcher import ResourceFetcher
from core.services.steps import RecordT, ensure_root_url, fetch_record, merge_result
from core.streams import from_coroutine, join_all

LOGGER = logging.getLogger(__name__)


def aggregate_stream(fetcher: ResourceFetcher, root_url: str) -> Observable[AggregateResult]:
    """Return an observable that emits exactly one `AggregateResult`."""

    def fetch(model: type[RecordT], url: str) -> Observable[RecordT]:
        return from_coroutine(lambda: fetch_record(fetcher, model, url))

    def load_person(url: str) -> Observable[PersonRecord]:
        LOGGER.info("Aggregating %s (stream)", url)
        return fetch(PersonRecord, url)

    def attach_homeworld(person: PersonRecord) -> Observable[tuple[PersonRecord, PlanetRecord]]:
        return fetch(PlanetRecord, person.homeworld_url).pipe(
            ops.map(lambda planet: (person, planet)),
        )

    def attach_films(pair: tuple[PersonRecord, PlanetRecord]) -> Observable[AggregateResult]:
        person, planet = pair
        films = join_all([fetch(FilmRecord, url) for url in person.film_urls])
        return films.pipe(ops.map(lambda records: merge_result(person, planet, records)))

    def log_result(result: AggregateResult) -> AggregateResult:
        LOGGER.info("Aggregated %s with %d films", result.name, len(result.films))
        return result

    return rx.of(root_url).pipe(
        ops.map(ensure_root_url),
        ops.flat_map(load_person),
        ops.flat_map(attach_homeworld),
        ops.flat_map(attach_films),
        ops.map(log_result),
    )


async def collect_stream(fetcher: ResourceFetcher, root_url: str) -> AggregateResult:
    """Await the single element of `aggregate_stream`."""

    return await aggregate_stream(fetcher, root_url)
