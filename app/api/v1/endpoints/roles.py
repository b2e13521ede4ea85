"""
Role catalogue endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_current_user
from app.models.user import User
from app.rugby.exceptions import InvalidRole
from app.rugby.permissions import (
    Role,
    department_for,
    parse_role,
    permissions_for,
    rank_of,
)
from app.schemas.role import RoleInfo

router = APIRouter()


def _role_info(role: Role) -> RoleInfo:
    return RoleInfo(
        role=role,
        rank=rank_of(role),
        department=department_for(role),
        permissions=sorted(permissions_for(role), key=lambda p: p.value),
    )


@router.get("", summary="List every role with its rank and permissions.", response_model=list[RoleInfo], )
def list_roles(user: User = Depends(get_current_user)):
    return [_role_info(role) for role in Role]


@router.get("/{role}", summary="Get one role with its rank and permissions.", response_model=RoleInfo, )
def get_role(role: str, user: User = Depends(get_current_user)):
    try:
        parsed = parse_role(role)
    except InvalidRole as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return _role_info(parsed)

