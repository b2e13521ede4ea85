"""
User service.

Business logic for user management and authentication.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import create_access_token, get_password_hash, verify_password
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.rugby.permissions import Role
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin

logger = get_logger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new player account.

        Staff roles are granted afterwards through :meth:`assign_role`.

        Raises:
            HTTPException: If email already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = User(email=user_data.email, hashed_password=get_password_hash(user_data.password),
                    full_name=user_data.full_name, role=Role.PLAYER.value, )

        user = self.repository.create(user)
        logger.info("Registered user %s", user.id)
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Authenticate user and return access token.

        Raises:
            HTTPException: If credentials are invalid or the account is inactive
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.info("Failed login for %s", login_data.email)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.email }, expires_delta=access_token_expires)

        return Token(access_token=access_token, token_type="bearer")

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.repository.get_by_email(email)

    def get_existing_user(self, user_id: int) -> User:
        user = self.repository.get_by_id(user_id)
        if not user:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    def assign_role(self, user: User, role: Role) -> User:
        """Change ``user``'s role. Authorization is checked by the caller."""
        previous = user.role
        user.role = role.value
        user.updated_at = datetime.now(timezone.utc)
        user = self.repository.update(user)
        logger.info("Role of user %s changed from %s to %s", user.id, previous, user.role)
        return user
