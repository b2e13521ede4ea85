"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access, and
the explicit authorization guards every protected endpoint calls first.
"""

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import decode_access_token, oauth2_scheme
from app.db.session import get_db
from app.models.user import User
from app.rugby.permissions import Permission, Role, can_act_as, has_permission
from app.services.user_service import UserService

logger = get_logger(__name__)


def get_current_user(token: str = Depends(oauth2_scheme), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    email = decode_access_token(token)
    if not email:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or expired token",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    user = UserService(db).get_user_by_email(email)
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found",
                            headers={ "WWW-Authenticate": "Bearer" }, )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")
    return user


# ----------------------------------------------------------------------
# Authorization guards
# ----------------------------------------------------------------------


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


def _strict_permissions() -> bool:
    """Unknown roles or permissions are fatal in debug, or when configured strict."""
    return settings.PERMISSIONS_STRICT or settings.DEBUG


def require_permission(user: User, permission: Permission) -> None:
    """Raise 403 unless ``user``'s role grants ``permission``."""
    if not has_permission(user.role, permission, strict=_strict_permissions()):
        logger.info("User %s (%s) denied %s", user.id, user.role, permission.value)
        raise _forbidden(f"Permission denied: {permission.value}")


def require_self_or_permission(user: User, player_id: int, permission: Permission) -> None:
    """Players may always act on their own data; anyone else needs ``permission``."""
    if user.id == player_id:
        return
    require_permission(user, permission)


def require_rank(user: User, target_role: Role | str) -> None:
    """Raise 403 unless ``user`` ranks at least as high as ``target_role``."""
    target = target_role.value if isinstance(target_role, Role) else target_role
    if not can_act_as(user.role, target, strict=_strict_permissions()):
        logger.info("User %s (%s) cannot act as %s", user.id, user.role, target)
        raise _forbidden(f"Role {user.role} cannot act as {target}")
