"""Building blocks shared by every aggregation style.

The three styles only differ in how they sequence these steps; fetching,
decoding, projecting and merging live here once so that all of them produce
identical results.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, TypeVar

from pydantic import BaseModel, ValidationError

from core.domain.models import (
    AggregateResult,
    FilmRecord,
    PersonRecord,
    PlanetRecord,
    is_absolute_http_url,
)
from core.errors import DecodeError, FetchError
from core.interfaces.fetcher import ResourceFetcher

LOGGER = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)


def ensure_root_url(url: str) -> str:
    """Reject anything that is not an absolute http(s) URL before any I/O."""

    if not isinstance(url, str) or not is_absolute_http_url(url):
        raise FetchError(str(url), reason="not an absolute http(s) URL")
    return url


def decode_record(model: type[RecordT], url: str, payload: Any) -> RecordT:
    """Validate `payload` as `model`, mapping validation failures to `DecodeError`.

    Only the first validation error is reported; its location uses the
    upstream key names (e.g. `films.1`).
    """

    try:
        record = model.model_validate(payload)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise DecodeError(url, field=field, reason=first["msg"]) from exc
    LOGGER.debug("Decoded %s from %s", model.__name__, url)
    return record


async def fetch_record(fetcher: ResourceFetcher, model: type[RecordT], url: str) -> RecordT:
    payload = await fetcher.fetch_json(url)
    return decode_record(model, url, payload)


async def fetch_person(fetcher: ResourceFetcher, url: str) -> PersonRecord:
    return await fetch_record(fetcher, PersonRecord, url)


async def fetch_planet(fetcher: ResourceFetcher, url: str) -> PlanetRecord:
    return await fetch_record(fetcher, PlanetRecord, url)


async def fetch_film(fetcher: ResourceFetcher, url: str) -> FilmRecord:
    return await fetch_record(fetcher, FilmRecord, url)


def merge_result(
    person: PersonRecord,
    planet: PlanetRecord,
    films: Sequence[FilmRecord],
) -> AggregateResult:
    """Flatten person + homeworld + films into the output record.

    `films` must be in the order of `person.film_urls`.
    """

    if len(films) != len(person.film_urls):
        raise ValueError(
            f"expected {len(person.film_urls)} films for {person.name!r}, got {len(films)}"
        )
    return AggregateResult(
        name=person.name,
        height=person.height,
        gender=person.gender,
        homeworld=planet.name,
        films=[film.summary() for film in films],
    )
