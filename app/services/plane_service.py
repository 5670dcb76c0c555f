"""Fleet service: plane CRUD with tail-number uniqueness."""

import logging

from app.core.exceptions import (
    DuplicateRecordError,
    PlaneExistsError,
    PlaneHasPartsError,
    PlaneNotFoundError,
)
from app.models.plane import Plane
from app.models.plane_part import PlanePart
from app.repositories.plane_repository import PlaneRepository

logger = logging.getLogger(__name__)


class PlaneService:
    def __init__(self, planes: PlaneRepository) -> None:
        self.planes = planes

    def create_plane(self, tail_number: str, model: str) -> Plane:
        logger.info("PlaneService: create_plane tail_number=%s model=%s", tail_number, model)
        if self.planes.get_by_tail_number(tail_number) is not None:
            logger.warning("PlaneService: tail number already exists tail_number=%s", tail_number)
            raise PlaneExistsError()

        try:
            plane = self.planes.create(tail_number=tail_number, model=model)
        except DuplicateRecordError as e:
            raise PlaneExistsError() from e

        logger.info("PlaneService: create_plane successful plane_id=%s", plane.id)
        return plane

    def get_plane(self, plane_id: int) -> Plane:
        plane = self.planes.get_by_id(plane_id)
        if plane is None:
            logger.warning("PlaneService: plane not found plane_id=%s", plane_id)
            raise PlaneNotFoundError()
        return plane

    def get_plane_by_tail(self, tail_number: str) -> Plane:
        plane = self.planes.get_by_tail_number(tail_number)
        if plane is None:
            logger.warning("PlaneService: plane not found tail_number=%s", tail_number)
            raise PlaneNotFoundError()
        return plane

    def get_all_planes(self) -> list[Plane]:
        planes = self.planes.get_all()
        logger.info("PlaneService: get_all_planes count=%s", len(planes))
        return planes

    def update_plane(
        self,
        plane_id: int,
        tail_number: str | None = None,
        model: str | None = None,
    ) -> Plane:
        logger.info("PlaneService: update_plane plane_id=%s", plane_id)
        plane = self.get_plane(plane_id)

        if tail_number is not None and tail_number != plane.tail_number:
            if self.planes.get_by_tail_number(tail_number) is not None:
                logger.warning(
                    "PlaneService: tail number already exists tail_number=%s", tail_number
                )
                raise PlaneExistsError()
            plane.tail_number = tail_number
        if model is not None:
            plane.model = model

        try:
            plane = self.planes.update(plane)
        except DuplicateRecordError as e:
            raise PlaneExistsError() from e

        logger.info("PlaneService: update_plane successful plane_id=%s", plane_id)
        return plane

    def delete_plane(self, plane_id: int) -> None:
        """Delete a plane. Refused while parts still reference it."""
        logger.info("PlaneService: delete_plane plane_id=%s", plane_id)
        plane = self.get_plane(plane_id)
        if self.planes.has_parts(plane_id):
            logger.warning("PlaneService: plane still has parts plane_id=%s", plane_id)
            raise PlaneHasPartsError()
        self.planes.delete(plane)
        logger.info("PlaneService: delete_plane successful plane_id=%s", plane_id)

    def get_plane_with_parts(self, plane_id: int) -> tuple[Plane, list[PlanePart]]:
        plane = self.planes.get_with_parts(plane_id)
        if plane is None:
            logger.warning("PlaneService: plane not found plane_id=%s", plane_id)
            raise PlaneNotFoundError()
        parts = list(plane.parts)
        logger.info(
            "PlaneService: get_plane_with_parts plane_id=%s parts=%s", plane_id, len(parts)
        )
        return plane, parts
