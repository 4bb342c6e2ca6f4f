from typing import Annotated

from fastapi import APIRouter, Body, Depends, Path, Query, Request
from fastapi.encoders import jsonable_encoder

from foyer.deps import get_university_service
from foyer.repositories.filters import BIGINT_MAX
from foyer.schemas.response import ListResponse, Meta, OkResponse
from foyer.schemas.university import UniversityCreate, UniversityOut, UniversityUpdate
from foyer.services.university_service import UniversityService

router = APIRouter()

RESERVED_PARAMS = {"offset", "limit", "sort_by", "sort_dir", "only_deleted", "q", "is_deleted"}

UniversityId = Annotated[int, Path(ge=1, le=BIGINT_MAX)]


def _out(university) -> dict:
    return jsonable_encoder(UniversityOut.model_validate(university))


@router.get("/list", response_model=ListResponse)
def list_universities(
    request: Request,
    offset: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=200),
    sort_by: str | None = None,
    sort_dir: str | None = None,
    only_deleted: bool = False,
    q: str | None = None,
    service: UniversityService = Depends(get_university_service),
):
    params = {k: v for k, v in request.query_params.items() if k not in RESERVED_PARAMS}
    items, total = service.list(
        params=params,
        offset=offset,
        limit=limit,
        sort_by=sort_by,
        sort_dir=sort_dir,
        only_deleted=only_deleted,
        q=q,
    )
    return ListResponse(
        data=[_out(item) for item in items],
        meta=Meta(offset=offset, limit=limit, total=total),
    )


@router.get("/search", response_model=ListResponse)
def search_by_name(
    name: str = Query(..., min_length=1),
    service: UniversityService = Depends(get_university_service),
):
    items = service.find_by_name(name)
    return ListResponse(
        data=[_out(item) for item in items],
        meta=Meta(offset=0, limit=len(items), total=len(items)),
    )


@router.get("/{university_id}", response_model=OkResponse)
def get_university(
    university_id: UniversityId,
    service: UniversityService = Depends(get_university_service),
):
    return OkResponse(data=_out(service.get(university_id)))


@router.post("/create", response_model=OkResponse)
def create_university(
    payload: UniversityCreate = Body(...),
    service: UniversityService = Depends(get_university_service),
):
    return OkResponse(data=_out(service.create(payload)))


@router.put("/{university_id}", response_model=OkResponse)
def update_university(
    university_id: UniversityId,
    payload: UniversityUpdate = Body(...),
    service: UniversityService = Depends(get_university_service),
):
    return OkResponse(data=_out(service.update(university_id, payload)))


@router.delete("/{university_id}", response_model=OkResponse)
def delete_university(
    university_id: UniversityId,
    service: UniversityService = Depends(get_university_service),
):
    return OkResponse(data=_out(service.delete(university_id)))
