"""
Database initialization.

Creates all tables and optionally seeds a first admin account.
"""

from typing import Optional

from sqlmodel import Session, SQLModel

from app.core.logging import get_logger
from app.core.security import get_password_hash
from app.db.repositories.user import UserRepository
from app.db.session import engine
from app.models.user import User
from app.rugby.permissions import Role

logger = get_logger(__name__)


def init_db(admin_email: Optional[str] = None, admin_password: Optional[str] = None) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Creates the admin user when credentials are given and it does not exist yet
    """
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables")
    SQLModel.metadata.create_all(engine)

    if admin_email and admin_password:
        with Session(engine) as session:
            repo = UserRepository(session)
            if repo.exists_by_email(admin_email):
                logger.info("Admin user %s already exists", admin_email)
            else:
                repo.create(User(email=admin_email, hashed_password=get_password_hash(admin_password),
                                 full_name="Administrator", role=Role.ADMIN.value))
                logger.info("Admin user %s created", admin_email)

    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
