"""ORM model for aircraft in the fleet."""

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base


class Plane(Base):
    """An aircraft identified by its tail number. Owns zero or more PlanePart rows."""

    __tablename__ = "planes"
    __repr_attrs__ = ("id", "tail_number")

    id = Column(Integer, primary_key=True, autoincrement=True)
    tail_number = Column(String(50), nullable=False, unique=True, index=True)
    model = Column(String(100), nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    # No cascade: parts are deleted explicitly and a plane with parts cannot be deleted.
    parts = relationship(
        "PlanePart",
        back_populates="plane",
        order_by="PlanePart.id",
        passive_deletes="all",
    )
