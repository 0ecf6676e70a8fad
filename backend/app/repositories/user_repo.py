# app/repositories/user_repo.py
from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from app.models import User
from app.repositories.base import BaseRepository, Page
from app.schemas.enums import UserRole

class UserRepository(BaseRepository[User]):
    model = User

    # READS
    def get_by_email(self, email: str) -> Optional[User]:
        stmt = select(User).where(func.lower(User.email) == email.lower())
        return self.db.execute(stmt).scalar_one_or_none()

    def list(self, *, role: UserRole | None = None, limit: int = 50, offset: int = 0) -> Page[User]:
        stmt = select(User).order_by(User.id.asc())
        if role is not None:
            stmt = stmt.where(User.role == role)
        return self.page_from_stmt(stmt, limit=limit, offset=offset)

    def lock(self, user_id: int) -> Optional[User]:
        """Row lock that serializes a user's log-and-award writes (no-op on SQLite)."""
        stmt = select(User).where(User.id == user_id).with_for_update()
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, *, email: str, name: str, password_hash: str, role: UserRole = UserRole.client) -> User:
        user = User(email=email, name=name, password_hash=password_hash, role=role)
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            # Clean marker the router maps to 400
            raise ValueError("email_already_exists")

    def set_role(self, user_id: int, *, role: UserRole) -> Optional[User]:
        """Use from an admin-only route."""
        user = self.get(user_id)
        if not user:
            return None
        user.role = role
        self.db.commit()
        self.db.refresh(user)
        return user
