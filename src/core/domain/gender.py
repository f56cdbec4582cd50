"""Gender tags published by the upstream people resource.

The upstream API exposes gender as a free string. We map it to a closed
enumeration so that an unexpected tag fails decoding instead of flowing
silently into the aggregated output.
"""

from __future__ import annotations

from enum import Enum


class Gender(str, Enum):
    """Closed set of gender tags accepted from the upstream API."""

    MALE = "male"
    FEMALE = "female"
    DIVERS = "divers"
    HERMAPHRODITE = "hermaphrodite"
    NOT_APPLICABLE = "n/a"
    NONE = "none"

    def label(self) -> str:
        """Human readable label for tables."""

        if self is Gender.NOT_APPLICABLE:
            return "n/a"
        return self.value.capitalize()
