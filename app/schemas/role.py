"""Role catalogue schemas."""

from pydantic import BaseModel

from app.rugby.permissions import Permission, Role


class RoleInfo(BaseModel):
    """A role with its rank, department and allow-list."""

    role: Role
    rank: int
    department: str
    permissions: list[Permission]
