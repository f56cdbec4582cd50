"""Aggregation written as straight-line async/await.

Each step suspends the coroutine until its response is decoded. The only
concurrency is the film fan-out: `asyncio.gather` starts every film request
before awaiting any of them and returns the results in input order.
"""

from __future__ import annotations

import asyncio
import logging

from core.domain.models import AggregateResult
from core.interfaces.fetcher import ResourceFetcher
from core.services.steps import (
    ensure_root_url,
    fetch_film,
    fetch_person,
    fetch_planet,
    merge_result,
)

LOGGER = logging.getLogger(__name__)


async def aggregate(fetcher: ResourceFetcher, root_url: str) -> AggregateResult:
    ensure_root_url(root_url)
    LOGGER.info("Aggregating %s (await)", root_url)

    person = await fetch_person(fetcher, root_url)
    planet = await fetch_planet(fetcher, person.homeworld_url)

    # The first failing film propagates; siblings keep running and are discarded.
    films = await asyncio.gather(*(fetch_film(fetcher, url) for url in person.film_urls))

    result = merge_result(person, planet, films)
    LOGGER.info("Aggregated %s with %d films", result.name, len(result.films))
    return result
