"""Domain records.

Pure, strictly validated data structures (Pydantic v2). The domain knows
nothing about HTTP or the CLI, only about people, planets and films.
"""

from core.domain.gender import Gender
from core.domain.models import (
    AggregateResult,
    FilmRecord,
    FilmSummary,
    PersonRecord,
    PlanetRecord,
)

__all__ = [
    "AggregateResult",
    "FilmRecord",
    "FilmSummary",
    "Gender",
    "PersonRecord",
    "PlanetRecord",
]
