# app/services/tvshow_validator.py
from __future__ import annotations

from datetime import datetime
from typing import List

from app.schemas import TvShow, ValidationFailure

FAVOURITE_MIN = 0
FAVOURITE_MAX = 1


def _is_default_date(value: datetime | None) -> bool:
    return value is None or value.replace(tzinfo=None) == datetime.min


def validate_tvshow(show: TvShow) -> List[ValidationFailure]:
    """Field rules for a TV show. Returns every failure, never raises."""
    failures: List[ValidationFailure] = []

    if show.id <= 0:
        failures.append(ValidationFailure(
            property_name="Id", error_message="'Id' must be greater than '0'."
        ))

    if not (show.title or "").strip():
        failures.append(ValidationFailure(
            property_name="Title", error_message="'Title' must not be empty."
        ))

    if _is_default_date(show.release_date):
        failures.append(ValidationFailure(
            property_name="ReleaseDate", error_message="'Release Date' must not be empty."
        ))

    if not FAVOURITE_MIN <= show.favourite <= FAVOURITE_MAX:
        failures.append(ValidationFailure(
            property_name="Favourite", error_message="Value must be 0 or 1"
        ))

    return failures
