"""Repository for PlanePart rows, including the maintenance-alert query."""

from sqlalchemy import ColumnElement, and_, case, true, update

from app.models.plane_part import PlanePart
from app.repositories.base import BaseRepository

# SQL form of services.maintenance.usage_percent, used for ordering alerts.
USAGE_PERCENT_EXPR = case(
    (
        PlanePart.usage_limit_hours > 0,
        PlanePart.usage_hours / PlanePart.usage_limit_hours * 100,
    ),
    else_=0.0,
)


def maintenance_filter(threshold_percent: float) -> ColumnElement[bool]:
    """SQL form of services.maintenance.needs_maintenance, compared without dividing."""
    if threshold_percent <= 0:
        return true()
    return and_(
        PlanePart.usage_limit_hours > 0,
        PlanePart.usage_hours * 100 >= threshold_percent * PlanePart.usage_limit_hours,
    )


class PlanePartRepository(BaseRepository):
    """Repository for PlanePart model operations"""

    def create(
        self,
        plane_id: int,
        part_name: str,
        serial_number: str,
        category: str,
        usage_hours: float,
        usage_limit_hours: float,
    ) -> PlanePart:
        part = PlanePart(
            plane_id=plane_id,
            part_name=part_name,
            serial_number=serial_number,
            category=category,
            usage_hours=usage_hours,
            usage_limit_hours=usage_limit_hours,
        )
        with self.store_call("failed to create plane part"):
            self.db.add(part)
            self.db.commit()
            self.db.refresh(part)
        return part

    def get_by_id(self, part_id: int) -> PlanePart | None:
        with self.store_call("failed to get plane part by id"):
            return self.db.get(PlanePart, part_id)

    def get_by_serial_number(self, serial_number: str) -> PlanePart | None:
        with self.store_call("failed to get plane part by serial number"):
            return (
                self.db.query(PlanePart)
                .filter(PlanePart.serial_number == serial_number)
                .first()
            )

    def get_by_plane_id(self, plane_id: int) -> list[PlanePart]:
        with self.store_call("failed to get plane parts by plane id"):
            return (
                self.db.query(PlanePart)
                .filter(PlanePart.plane_id == plane_id)
                .order_by(PlanePart.id)
                .all()
            )

    def get_by_plane_id_and_category(self, plane_id: int, category: str) -> list[PlanePart]:
        with self.store_call("failed to get plane parts by plane id and category"):
            return (
                self.db.query(PlanePart)
                .filter(PlanePart.plane_id == plane_id, PlanePart.category == category)
                .order_by(PlanePart.id)
                .all()
            )

    def get_all(self) -> list[PlanePart]:
        with self.store_call("failed to get all plane parts"):
            return self.db.query(PlanePart).order_by(PlanePart.id).all()

    def get_needing_maintenance(self, threshold_percent: float) -> list[PlanePart]:
        """Parts at or above threshold_percent usage, highest usage first."""
        with self.store_call("failed to get parts needing maintenance"):
            return (
                self.db.query(PlanePart)
                .filter(maintenance_filter(threshold_percent))
                .order_by(USAGE_PERCENT_EXPR.desc(), PlanePart.id)
                .all()
            )

    def update(self, part: PlanePart) -> PlanePart:
        with self.store_call("failed to update plane part"):
            self.db.commit()
            self.db.refresh(part)
        return part

    def update_usage(self, part: PlanePart, usage_hours: float) -> PlanePart:
        """Write only the usage_hours column; other columns are left as stored."""
        with self.store_call("failed to update usage hours"):
            self.db.execute(
                update(PlanePart)
                .where(PlanePart.id == part.id)
                .values(usage_hours=usage_hours)
                .execution_options(synchronize_session=False)
            )
            self.db.commit()
            self.db.refresh(part)
        return part

    def delete(self, part: PlanePart) -> None:
        with self.store_call("failed to delete plane part"):
            self.db.delete(part)
            self.db.commit()
