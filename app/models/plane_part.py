"""ORM model for parts installed on a plane, tracked against a usage limit."""

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship

from app.models.base import Base
from app.services.maintenance import usage_percent


class PlanePart(Base):
    """
    A physical part (unique serial number) installed on exactly one plane.

    usage_percent is derived on read and never stored.
    """

    __tablename__ = "plane_parts"
    __repr_attrs__ = ("id", "serial_number", "plane_id")
    __table_args__ = (
        CheckConstraint("usage_hours >= 0", name="ck_plane_parts_usage_hours_non_negative"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    plane_id = Column(Integer, ForeignKey("planes.id"), nullable=False, index=True)
    part_name = Column(String(255), nullable=False)
    serial_number = Column(String(100), nullable=False, unique=True, index=True)
    category = Column(String(150), nullable=False, index=True)
    usage_hours = Column(Float, nullable=False, default=0.0)
    usage_limit_hours = Column(Float, nullable=False)
    installed_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    plane = relationship("Plane", back_populates="parts")

    @property
    def usage_percent(self) -> float:
        return usage_percent(self.usage_hours or 0.0, self.usage_limit_hours or 0.0)
