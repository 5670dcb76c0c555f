"""Plane endpoints (fleet CRUD). All routes require a valid principal."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from app.api.deps import get_current_principal, get_plane_service, require_admin
from app.schemas.auth import Principal
from app.schemas.plane import (
    CreatePlaneRequest,
    PlanePartResponse,
    PlaneResponse,
    PlaneWithPartsResponse,
    UpdatePlaneRequest,
)
from app.services.plane_service import PlaneService

router = APIRouter(dependencies=[Depends(get_current_principal)])

PlaneServiceDep = Annotated[PlaneService, Depends(get_plane_service)]


@router.post("", response_model=PlaneResponse, status_code=status.HTTP_201_CREATED)
def create_plane(body: CreatePlaneRequest, planes: PlaneServiceDep) -> PlaneResponse:
    plane = planes.create_plane(tail_number=body.tail_number, model=body.model)
    return PlaneResponse.model_validate(plane)


@router.get("", response_model=list[PlaneResponse])
def list_planes(planes: PlaneServiceDep) -> list[PlaneResponse]:
    return [PlaneResponse.model_validate(p) for p in planes.get_all_planes()]


@router.get("/tail/{tail_number}", response_model=PlaneResponse)
def get_plane_by_tail(tail_number: str, planes: PlaneServiceDep) -> PlaneResponse:
    return PlaneResponse.model_validate(planes.get_plane_by_tail(tail_number))


@router.get("/{plane_id}", response_model=PlaneResponse)
def get_plane(plane_id: int, planes: PlaneServiceDep) -> PlaneResponse:
    return PlaneResponse.model_validate(planes.get_plane(plane_id))


@router.put("/{plane_id}", response_model=PlaneResponse)
def update_plane(
    plane_id: int, body: UpdatePlaneRequest, planes: PlaneServiceDep
) -> PlaneResponse:
    plane = planes.update_plane(plane_id, tail_number=body.tail_number, model=body.model)
    return PlaneResponse.model_validate(plane)


@router.delete("/{plane_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_plane(
    plane_id: int,
    _admin: Annotated[Principal, Depends(require_admin)],
    planes: PlaneServiceDep,
) -> Response:
    """Admin only. 409 while the plane still has parts."""
    planes.delete_plane(plane_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{plane_id}/with-parts", response_model=PlaneWithPartsResponse)
def get_plane_with_parts(plane_id: int, planes: PlaneServiceDep) -> PlaneWithPartsResponse:
    plane, parts = planes.get_plane_with_parts(plane_id)
    return PlaneWithPartsResponse(
        plane=PlaneResponse.model_validate(plane),
        parts=[PlanePartResponse.model_validate(p) for p in parts],
    )
