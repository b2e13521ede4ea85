"""Core rules: role permissions, readiness scoring and wellness trends."""

from app.rugby.permissions import Permission, Role, can_act_as, has_permission, permissions_for
from app.rugby.readiness import classify, compute_readiness
from app.rugby.trends import compute_trend

__all__ = [
    "Permission",
    "Role",
    "can_act_as",
    "classify",
    "compute_readiness",
    "compute_trend",
    "has_permission",
    "permissions_for",
]
