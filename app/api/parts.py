"""Plane part endpoints and maintenance alerts. Mounted under /planes ahead of the plane routes."""

from collections.abc import Iterable
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.deps import get_current_principal, get_plane_part_service, require_role
from app.core.security import ROLE_MECHANIC
from app.models.plane_part import PlanePart
from app.schemas.auth import Principal
from app.schemas.plane import (
    CreatePlanePartRequest,
    PlanePartResponse,
    UpdatePartUsageRequest,
    UpdatePlanePartRequest,
)
from app.services.maintenance import DEFAULT_ALERT_THRESHOLD
from app.services.plane_part_service import PlanePartService

router = APIRouter(dependencies=[Depends(get_current_principal)])

PartServiceDep = Annotated[PlanePartService, Depends(get_plane_part_service)]


def _to_responses(parts: Iterable[PlanePart]) -> list[PlanePartResponse]:
    return [PlanePartResponse.model_validate(p) for p in parts]


@router.get("/maintenance/alerts", response_model=list[PlanePartResponse])
def get_maintenance_alerts(
    parts: PartServiceDep,
    threshold: Annotated[
        float, Query(ge=0, allow_inf_nan=False, description="Usage percent threshold")
    ] = DEFAULT_ALERT_THRESHOLD,
) -> list[PlanePartResponse]:
    """Parts at or above `threshold` percent of their usage limit, highest usage first."""
    return _to_responses(parts.get_parts_needing_maintenance(threshold))


@router.get("/parts", response_model=list[PlanePartResponse])
def list_parts(parts: PartServiceDep) -> list[PlanePartResponse]:
    return _to_responses(parts.get_all_parts())


@router.get("/parts/{part_id}", response_model=PlanePartResponse)
def get_part(part_id: int, parts: PartServiceDep) -> PlanePartResponse:
    return PlanePartResponse.model_validate(parts.get_part(part_id))


@router.put("/parts/{part_id}", response_model=PlanePartResponse)
def update_part(
    part_id: int, body: UpdatePlanePartRequest, parts: PartServiceDep
) -> PlanePartResponse:
    part = parts.update_part(
        part_id,
        part_name=body.part_name,
        serial_number=body.serial_number,
        category=body.category,
        usage_limit_hours=body.usage_limit_hours,
    )
    return PlanePartResponse.model_validate(part)


@router.put("/parts/{part_id}/usage", response_model=PlanePartResponse)
def update_part_usage(
    part_id: int,
    body: UpdatePartUsageRequest,
    _mechanic: Annotated[Principal, Depends(require_role(ROLE_MECHANIC))],
    parts: PartServiceDep,
) -> PlanePartResponse:
    """Mechanics (or admins) log usage. 400 if the new hours exceed the part's limit."""
    part = parts.update_part_usage(part_id, body.usage_hours)
    return PlanePartResponse.model_validate(part)


@router.delete("/parts/{part_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
def delete_part(part_id: int, parts: PartServiceDep) -> Response:
    parts.delete_part(part_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{plane_id}/parts",
    response_model=PlanePartResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_part(
    plane_id: int, body: CreatePlanePartRequest, parts: PartServiceDep
) -> PlanePartResponse:
    part = parts.add_part(
        plane_id=plane_id,
        part_name=body.part_name,
        serial_number=body.serial_number,
        category=body.category,
        usage_hours=body.usage_hours,
        usage_limit_hours=body.usage_limit_hours,
    )
    return PlanePartResponse.model_validate(part)


@router.get("/{plane_id}/parts", response_model=list[PlanePartResponse])
def list_plane_parts(
    plane_id: int,
    parts: PartServiceDep,
    category: Annotated[str | None, Query(max_length=150)] = None,
) -> list[PlanePartResponse]:
    return _to_responses(parts.get_parts_by_plane(plane_id, category=category))
