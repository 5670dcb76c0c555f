"""Repository for Plane rows."""

from sqlalchemy.orm import selectinload

from app.models.plane import Plane
from app.models.plane_part import PlanePart
from app.repositories.base import BaseRepository


class PlaneRepository(BaseRepository):
    """Repository for Plane model operations"""

    def create(self, tail_number: str, model: str) -> Plane:
        plane = Plane(tail_number=tail_number, model=model)
        with self.store_call("failed to create plane"):
            self.db.add(plane)
            self.db.commit()
            self.db.refresh(plane)
        return plane

    def get_by_id(self, plane_id: int) -> Plane | None:
        with self.store_call("failed to get plane by id"):
            return self.db.get(Plane, plane_id)

    def get_by_tail_number(self, tail_number: str) -> Plane | None:
        with self.store_call("failed to get plane by tail number"):
            return self.db.query(Plane).filter(Plane.tail_number == tail_number).first()

    def get_all(self) -> list[Plane]:
        with self.store_call("failed to get all planes"):
            return self.db.query(Plane).order_by(Plane.id).all()

    def get_with_parts(self, plane_id: int) -> Plane | None:
        """Load the plane and eagerly its parts (ordered by id)."""
        with self.store_call("failed to get plane with parts"):
            return (
                self.db.query(Plane)
                .options(selectinload(Plane.parts))
                .filter(Plane.id == plane_id)
                .first()
            )

    def has_parts(self, plane_id: int) -> bool:
        with self.store_call("failed to count plane parts"):
            return (
                self.db.query(PlanePart.id)
                .filter(PlanePart.plane_id == plane_id)
                .first()
                is not None
            )

    def update(self, plane: Plane) -> Plane:
        with self.store_call("failed to update plane"):
            self.db.commit()
            self.db.refresh(plane)
        return plane

    def delete(self, plane: Plane) -> None:
        with self.store_call("failed to delete plane"):
            self.db.delete(plane)
            self.db.commit()
