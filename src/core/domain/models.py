"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Upstream bodies are loosely typed JSON; validating them here turns a missing
  or mistyped field into an explicit error instead of an undefined value deep
  in the merge step.
- The same models serialize the aggregated output (JSON export, CLI).

Note:
- These models describe *what* the data is, not *how* it is fetched.
- Upstream payloads carry many more fields (episode_id, climate, starships...);
  they are ignored on purpose.
"""

from __future__ import annotations

from typing import Annotated
from urllib.parse import urlsplit

from pydantic import AfterValidator, BaseModel, Field, StrictStr
from pydantic.config import ConfigDict

from core.domain.gender import Gender


def is_absolute_http_url(value: str) -> bool:
    parts = urlsplit(value)
    return parts.scheme in ("http", "https") and bool(parts.netloc)


def _require_absolute_url(value: str) -> str:
    if not is_absolute_http_url(value):
        raise ValueError("expected an absolute http(s) URL")
    return value


AbsoluteUrl = Annotated[StrictStr, AfterValidator(_require_absolute_url)]


class PersonRecord(BaseModel):
    """Root resource: a person and the URLs of its linked resources."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    name: StrictStr = Field(
        ...,
        description="Display name of the person.",
    )
    height: StrictStr = Field(
        ...,
        description="Height exactly as published upstream (kept as text, e.g. '172' or 'unknown').",
    )
    gender: Gender = Field(
        ...,
        description="Gender tag from the closed upstream set.",
    )
    homeworld_url: AbsoluteUrl = Field(
        ...,
        alias="homeworld",
        description="URL of the linked planet resource.",
    )
    film_urls: list[AbsoluteUrl] = Field(
        ...,
        alias="films",
        description="URLs of the linked film resources, in upstream order.",
    )


class PlanetRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    name: StrictStr = Field(..., description="Planet name.")


class FilmRecord(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    title: StrictStr = Field(..., description="Film title.")
    director: StrictStr = Field(..., description="Director(s) as published upstream.")
    release_date: StrictStr = Field(
        ...,
        description="ISO date literal (YYYY-MM-DD), not parsed.",
    )

    def summary(self) -> FilmSummary:
        """Reduce the film to the fields exposed in the aggregated result."""

        return FilmSummary(
            title=self.title,
            director=self.director,
            release_date=self.release_date,
        )


class FilmSummary(BaseModel):
    """Film as it appears inside `AggregateResult.films`."""

    model_config = ConfigDict(frozen=True)

    title: str
    director: str
    release_date: str


class AggregateResult(BaseModel):
    """Flattened view of a person with its homeworld and films.

    Invariant:
    - `films` has one entry per URL in `PersonRecord.film_urls`, same order.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Carried from PersonRecord.name.")
    height: str = Field(..., description="Carried from PersonRecord.height.")
    gender: Gender = Field(..., description="Carried from PersonRecord.gender.")
    homeworld: str = Field(..., description="Name of the linked planet.")
    films: list[FilmSummary] = Field(
        default_factory=list,
        description="Film summaries in the order of PersonRecord.film_urls.",
    )
