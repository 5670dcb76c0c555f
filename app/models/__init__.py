"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.plane import Plane
from app.models.plane_part import PlanePart
from app.models.user import User

__all__ = ["Base", "Plane", "PlanePart", "User"]
