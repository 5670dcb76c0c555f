"""SQLAlchemy declarative Base shared by the user, plane and part models."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; subclasses list the columns shown in repr via __repr_attrs__."""

    __repr_attrs__: tuple[str, ...] = ("id",)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name, None)}" for name in self.__repr_attrs__)
        return f"<{type(self).__name__}({fields})>"
