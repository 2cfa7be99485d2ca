from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# =========================
# TV shows
# =========================

# SQLite INTEGER range; anything wider can never be stored
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


class TvShow(BaseModel):
    """
    A single TV show record, as stored in the TvShows table and sent over the wire.

    Parsing is deliberately lenient: a missing id becomes 0 and a missing
    title/releaseDate becomes None, so the record validator can report them
    with its own messages instead of a generic "field required".
    """
    id: int = Field(default=0, ge=MIN_ID, le=MAX_ID)
    title: Optional[str] = None
    release_date: Optional[datetime] = Field(default=None, alias="releaseDate")
    genre: Optional[str] = None
    showtype: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("showtype", "showType"),
        serialization_alias="showtype",
    )
    actors: Optional[str] = None
    favourite: int = 0

    model_config = ConfigDict(populate_by_name=True)


# =========================
# Validation errors
# =========================

class ValidationFailure(BaseModel):
    """One field-rule failure. Serialised as {propertyName, errorMessage}."""
    property_name: str = Field(alias="propertyName")
    error_message: str = Field(alias="errorMessage")

    model_config = ConfigDict(populate_by_name=True)
