"""Repository for User rows."""

from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository):
    """Repository for User model operations"""

    def create(self, name: str, password_hash: str, role: str) -> User:
        user = User(name=name, password_hash=password_hash, role=role)
        with self.store_call("failed to create user"):
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> User | None:
        with self.store_call("failed to get user by id"):
            return self.db.get(User, user_id)

    def get_by_name(self, name: str) -> User | None:
        with self.store_call("failed to get user by name"):
            return self.db.query(User).filter(User.name == name).first()

    def get_all(self) -> list[User]:
        with self.store_call("failed to get all users"):
            return self.db.query(User).order_by(User.id).all()

    def update(self, user: User) -> User:
        with self.store_call("failed to update user"):
            self.db.commit()
            self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        with self.store_call("failed to delete user"):
            self.db.delete(user)
            self.db.commit()
