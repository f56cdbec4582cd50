"""Control-flow styles available for an aggregation."""

from __future__ import annotations

from enum import Enum


class AggregationStyle(str, Enum):
    """The same fetch-and-join pipeline, expressed three ways."""

    CALLBACKS = "callbacks"
    AWAIT = "await"
    STREAM = "stream"

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return {
            AggregationStyle.CALLBACKS: "Chained callbacks",
            AggregationStyle.AWAIT: "Sequential await",
            AggregationStyle.STREAM: "Stream composition",
        }[self]
