"""
User administration endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from app.api.dependencies import get_current_user, require_permission, require_rank
from app.db.session import get_db
from app.models.user import User
from app.rugby.permissions import Permission
from app.schemas.user import RoleAssignment, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.get("/{user_id}", summary="Get a user profile.", response_model=UserResponse, )
def get_user(user_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    if user.id != user_id:
        require_permission(user, Permission.VIEW_ALL_PLAYERS)
    return UserService(db).get_existing_user(user_id)


@router.put("/{user_id}/role", summary="Change a user's role.", response_model=UserResponse, )
def assign_role(user_id: int, data: RoleAssignment, db: Session = Depends(get_db),
                user: User = Depends(get_current_user), ):
    """
    Requires ``manage_users``.  The caller must also rank at least as high
    as both the user's current role and the role being granted.
    """
    require_permission(user, Permission.MANAGE_USERS)
    service = UserService(db)
    target = service.get_existing_user(user_id)
    require_rank(user, target.role)
    require_rank(user, data.role)
    return service.assign_role(target, data.role)
