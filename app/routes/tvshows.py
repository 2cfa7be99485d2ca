# app/routes/tvshows.py
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.context import get_tvshow_service
from app.schemas import MAX_ID, MIN_ID, TvShow, ValidationFailure
from app.services.tvshow_service import TvShowService
from app.services.tvshow_validator import validate_tvshow

router = APIRouter(tags=["TvShows"])

BASE_ROUTE = "/tvshows"
DUPLICATE_ID_MESSAGE = "A tvShow with this Id already created"

# JSON key (lower-cased) -> property name reported back in validation errors
_PROPERTY_NAMES = {
    "id": "Id",
    "title": "Title",
    "releasedate": "ReleaseDate",
    "release_date": "ReleaseDate",
    "genre": "Genre",
    "showtype": "ShowType",
    "actors": "Actors",
    "favourite": "Favourite",
}

_BAD_REQUEST = {400: {"model": List[ValidationFailure], "description": "Validation failed"}}


# ──────────────────────────────────────────────────────────────────────
# Helpers
# ──────────────────────────────────────────────────────────────────────

def _bad_request(failures: List[ValidationFailure]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=[f.model_dump(by_alias=True) for f in failures],
    )


def _dump(show: TvShow) -> Dict[str, Any]:
    return show.model_dump(mode="json", by_alias=True)


def _given(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def _ensure_storable(id: int) -> None:
    # an id outside the INTEGER range cannot name a stored show
    if not MIN_ID <= id <= MAX_ID:
        raise HTTPException(status_code=404, detail="Not Found")


async def _read_body(request: Request) -> Tuple[Optional[Dict[str, Any]], List[ValidationFailure]]:
    try:
        raw = await request.json()
    except ValueError:
        return None, [ValidationFailure(property_name="", error_message="Request body is not valid JSON.")]
    if not isinstance(raw, dict):
        return None, [ValidationFailure(property_name="", error_message="Request body must be a JSON object.")]
    return raw, []


def _parse_tvshow(raw: Dict[str, Any]) -> Tuple[Optional[TvShow], List[ValidationFailure]]:
    try:
        return TvShow.model_validate(raw), []
    except ValidationError as e:
        failures = []
        for err in e.errors():
            key = str(err["loc"][0]) if err["loc"] else ""
            failures.append(ValidationFailure(
                property_name=_PROPERTY_NAMES.get(key.lower(), key),
                error_message=err["msg"],
            ))
        return None, failures


async def _bind_and_validate(
    request: Request, path_id: Optional[int] = None
) -> Tuple[Optional[TvShow], List[ValidationFailure]]:
    """parse -> (pin id from path) -> validate"""
    raw, failures = await _read_body(request)
    if failures:
        return None, failures
    if path_id is not None:
        raw["id"] = path_id
    show, failures = _parse_tvshow(raw)
    if failures:
        return None, failures
    return show, validate_tvshow(show)


# ──────────────────────────────────────────────────────────────────────
# Create
# ──────────────────────────────────────────────────────────────────────

@router.post(
    BASE_ROUTE,
    name="CreateTvShow",
    summary="Create",
    description="Insert new tvshow in the database",
    status_code=201,
    response_model=TvShow,
    responses=_BAD_REQUEST,
)
async def create_tvshow(
    request: Request,
    service: TvShowService = Depends(get_tvshow_service),
):
    show, failures = await _bind_and_validate(request)
    if failures:
        return _bad_request(failures)

    if not await service.create(show):
        return _bad_request([ValidationFailure(property_name="Id", error_message=DUPLICATE_ID_MESSAGE)])

    location = request.app.url_path_for("GetTvShow", id=str(show.id))
    return JSONResponse(status_code=201, content=_dump(show), headers={"Location": str(location)})


# ──────────────────────────────────────────────────────────────────────
# Reads
# ──────────────────────────────────────────────────────────────────────

@router.get(
    "/favouriteShows",
    name="Favourites",
    summary="List of Favourites",
    description="Return the list of favourites tvshows",
    response_model=List[TvShow],
)
async def get_favourites(service: TvShowService = Depends(get_tvshow_service)):
    return await service.get_by_favourite()


@router.get(
    BASE_ROUTE,
    name="GetTvShows",
    summary="Get the Tvshow or Shows",
    description=(
        "Search any tvshow or shows but use only one search method.\n"
        "If no query string used than it retrieves all tvshows"
    ),
    response_model=Union[List[TvShow], List[Optional[str]]],
)
async def get_tvshows(
    title: Optional[str] = Query(default=None),
    genre: Optional[str] = Query(default=None),
    show_type: Optional[str] = Query(default=None, alias="showType"),
    actors_from_title: Optional[str] = Query(default=None, alias="actorsFromTitle"),
    legacy_actors_from_title: Optional[str] = Query(default=None, alias="getActorsFromTitle", include_in_schema=False),
    service: TvShowService = Depends(get_tvshow_service),
):
    if _given(title):
        return await service.search_by_title(title)

    if _given(genre):
        return await service.get_by_genre(genre)

    if _given(show_type):
        return await service.get_by_show_type(show_type)

    actors_query = actors_from_title if _given(actors_from_title) else legacy_actors_from_title
    if _given(actors_query):
        return await service.search_actors_by_title(actors_query)

    return await service.get_all()


@router.get(
    BASE_ROUTE + "/{id}",
    name="GetTvShow",
    summary="Search",
    description="Search a Tvshow by its id",
    response_model=TvShow,
    responses={404: {"description": "Not Found"}},
)
async def get_tvshow(id: int, service: TvShowService = Depends(get_tvshow_service)):
    _ensure_storable(id)
    show = await service.get_by_id(id)
    if show is None:
        raise HTTPException(status_code=404, detail="Not Found")
    return show


# ──────────────────────────────────────────────────────────────────────
# Update / delete
# ──────────────────────────────────────────────────────────────────────

@router.put(
    BASE_ROUTE + "/{id}",
    name="UpdateTvShow",
    summary="Update Tvshow",
    description=(
        "Update the Tvshow. With this we can specify if it is a favourite or not. \n"
        "1 - Favourite 0 - Not"
    ),
    response_model=TvShow,
    responses={**_BAD_REQUEST, 404: {"description": "Not Found"}},
)
async def update_tvshow(
    id: int,
    request: Request,
    service: TvShowService = Depends(get_tvshow_service),
):
    _ensure_storable(id)
    show, failures = await _bind_and_validate(request, path_id=id)
    if failures:
        return _bad_request(failures)

    if not await service.update(show):
        raise HTTPException(status_code=404, detail="Not Found")
    return show


@router.delete(
    BASE_ROUTE + "/{id}",
    name="DeleteTvShow",
    summary="Delete TvShow",
    description="Deletes the tvshow from the database given the id",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Not Found"}},
)
async def delete_tvshow(id: int, service: TvShowService = Depends(get_tvshow_service)):
    _ensure_storable(id)
    if not await service.delete(id):
        raise HTTPException(status_code=404, detail="Not Found")
    return Response(status_code=204)
