"""Part lifecycle service: parts tied to a plane, usage updates against the limit, maintenance alerts."""

import logging

from app.core.exceptions import (
    DuplicateRecordError,
    PartExistsError,
    PartNotFoundError,
    PlaneNotFoundError,
    UsageExceedsLimitError,
)
from app.models.plane_part import PlanePart
from app.repositories.plane_part_repository import PlanePartRepository
from app.repositories.plane_repository import PlaneRepository
from app.services.maintenance import DEFAULT_ALERT_THRESHOLD, exceeds_limit

logger = logging.getLogger(__name__)


class PlanePartService:
    """
    Owns PlanePart records.

    Invariants held here:
      - a part is only created against an existing plane;
      - serial numbers are unique across all parts (the unique index is the final word);
      - usage updates never push usage_hours above usage_limit_hours.
    Changing usage_limit_hours through update_part does not re-check current usage.
    """

    def __init__(self, planes: PlaneRepository, parts: PlanePartRepository) -> None:
        self.planes = planes
        self.parts = parts

    def _require_plane(self, plane_id: int) -> None:
        if self.planes.get_by_id(plane_id) is None:
            logger.warning("PlanePartService: plane not found plane_id=%s", plane_id)
            raise PlaneNotFoundError()

    def add_part(
        self,
        plane_id: int,
        part_name: str,
        serial_number: str,
        category: str,
        usage_limit_hours: float,
        usage_hours: float | None = None,
    ) -> PlanePart:
        logger.info(
            "PlanePartService: add_part plane_id=%s part_name=%s serial_number=%s",
            plane_id,
            part_name,
            serial_number,
        )
        self._require_plane(plane_id)

        if self.parts.get_by_serial_number(serial_number) is not None:
            logger.warning(
                "PlanePartService: serial number already exists serial_number=%s", serial_number
            )
            raise PartExistsError()

        try:
            part = self.parts.create(
                plane_id=plane_id,
                part_name=part_name,
                serial_number=serial_number,
                category=category,
                usage_hours=usage_hours or 0.0,
                usage_limit_hours=usage_limit_hours,
            )
        except DuplicateRecordError as e:
            raise PartExistsError() from e

        logger.info(
            "PlanePartService: add_part successful part_id=%s plane_id=%s serial_number=%s",
            part.id,
            plane_id,
            serial_number,
        )
        return part

    def get_part(self, part_id: int) -> PlanePart:
        part = self.parts.get_by_id(part_id)
        if part is None:
            logger.warning("PlanePartService: part not found part_id=%s", part_id)
            raise PartNotFoundError()
        return part

    def get_parts_by_plane(self, plane_id: int, category: str | None = None) -> list[PlanePart]:
        logger.info("PlanePartService: get_parts_by_plane plane_id=%s category=%s", plane_id, category)
        self._require_plane(plane_id)

        if category:
            parts = self.parts.get_by_plane_id_and_category(plane_id, category)
        else:
            parts = self.parts.get_by_plane_id(plane_id)

        logger.info(
            "PlanePartService: get_parts_by_plane successful plane_id=%s count=%s",
            plane_id,
            len(parts),
        )
        return parts

    def get_all_parts(self) -> list[PlanePart]:
        parts = self.parts.get_all()
        logger.info("PlanePartService: get_all_parts count=%s", len(parts))
        return parts

    def update_part(
        self,
        part_id: int,
        part_name: str | None = None,
        serial_number: str | None = None,
        category: str | None = None,
        usage_limit_hours: float | None = None,
    ) -> PlanePart:
        logger.info("PlanePartService: update_part part_id=%s", part_id)
        part = self.get_part(part_id)

        # Check serial uniqueness before mutating the row.
        if serial_number is not None and serial_number != part.serial_number:
            if self.parts.get_by_serial_number(serial_number) is not None:
                logger.warning(
                    "PlanePartService: serial number already exists serial_number=%s",
                    serial_number,
                )
                raise PartExistsError()
            part.serial_number = serial_number
        if part_name is not None:
            part.part_name = part_name
        if category is not None:
            part.category = category
        if usage_limit_hours is not None:
            part.usage_limit_hours = usage_limit_hours

        try:
            part = self.parts.update(part)
        except DuplicateRecordError as e:
            raise PartExistsError() from e

        logger.info("PlanePartService: update_part successful part_id=%s", part_id)
        return part

    def update_part_usage(self, part_id: int, usage_hours: float) -> PlanePart:
        logger.info(
            "PlanePartService: update_part_usage part_id=%s new_usage_hours=%s",
            part_id,
            usage_hours,
        )
        part = self.get_part(part_id)

        if exceeds_limit(usage_hours, part.usage_limit_hours):
            logger.warning(
                "PlanePartService: usage hours exceed limit part_id=%s usage_hours=%s limit_hours=%s",
                part_id,
                usage_hours,
                part.usage_limit_hours,
            )
            raise UsageExceedsLimitError()

        part = self.parts.update_usage(part, usage_hours)
        logger.info(
            "PlanePartService: update_part_usage successful part_id=%s usage_percent=%.2f",
            part_id,
            part.usage_percent,
        )
        return part

    def delete_part(self, part_id: int) -> None:
        logger.info("PlanePartService: delete_part part_id=%s", part_id)
        part = self.get_part(part_id)
        self.parts.delete(part)
        logger.info("PlanePartService: delete_part successful part_id=%s", part_id)

    def get_parts_needing_maintenance(
        self, threshold_percent: float = DEFAULT_ALERT_THRESHOLD
    ) -> list[PlanePart]:
        """Parts whose usage percentage is at or above threshold_percent, highest first."""
        logger.info("PlanePartService: get_parts_needing_maintenance threshold=%s", threshold_percent)
        parts = self.parts.get_needing_maintenance(threshold_percent)
        logger.info("PlanePartService: get_parts_needing_maintenance count=%s", len(parts))
        return parts
