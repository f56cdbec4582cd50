"""Single entry-point over the three aggregation styles.

The CLI (and any future entry-point) calls `run_aggregation` and picks the
style; the result is the same record whichever style runs.
"""

from __future__ import annotations

from core.domain.models import AggregateResult
from core.interfaces.fetcher import ResourceFetcher
from core.services.await_style import aggregate
from core.services.callback_style import aggregate_with_callbacks
from core.services.stream_style import collect_stream
from core.services.styles import AggregationStyle


async def run_aggregation(
    fetcher: ResourceFetcher,
    root_url: str,
    style: AggregationStyle = AggregationStyle.AWAIT,
) -> AggregateResult:
    if style is AggregationStyle.CALLBACKS:
        return await aggregate_with_callbacks(fetcher, root_url)
    if style is AggregationStyle.STREAM:
        return await collect_stream(fetcher, root_url)
    return await aggregate(fetcher, root_url)
