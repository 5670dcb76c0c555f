"""ORM model for application users (auth and RBAC)."""

from sqlalchemy import Column, DateTime, Integer, String, func

from app.models.base import Base


class User(Base):
    """
    User account for JWT authentication and role-based access control.

    role: 'user', 'mechanic' or 'admin'
    """

    __tablename__ = "users"
    __repr_attrs__ = ("id", "name", "role")

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default="user")
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
