"""
User repository.

Handles database operations for User model.
"""

from typing import Iterable, Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def get_names(self, user_ids: Iterable[int]) -> dict[int, str]:
        """Map user ids to display names (full name, falling back to email)."""
        ids = list(set(user_ids))
        if not ids:
            return {}
        statement = select(User).where(User.id.in_(ids))
        return {u.id: u.full_name or u.email for u in self.session.exec(statement).all()}

    def update(self, user: User) -> User:
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None
