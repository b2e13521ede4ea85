"""
Role-based access control for squad staff and players.

Every user holds exactly one :class:`Role`.  A role grants a fixed
allow-list of :class:`Permission` values and carries an integer rank used
for hierarchical checks ("may a head coach act on behalf of an analyst?").

The tables below are built once at import time and exposed as read-only
mappings of frozensets, so they can be shared by any number of concurrent
requests without locking.

Unknown roles or permissions are programmer errors.  The lookup helpers
raise :class:`InvalidRole` / :class:`InvalidPermission`; the boolean checks
fail closed (log and deny) unless called with ``strict=True``, in which case
the error propagates.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from app.core.logging import get_logger
from app.rugby.exceptions import InvalidPermission, InvalidRole

logger = get_logger(__name__)


class Role(str, Enum):
    HEAD_COACH = "head_coach"
    ASSISTANT_COACH = "assistant_coach"
    STRENGTH_COACH = "strength_coach"
    MEDICAL_STAFF = "medical_staff"
    PHYSIOTHERAPIST = "physiotherapist"
    TEAM_MANAGER = "team_manager"
    ANALYST = "analyst"
    ADMIN = "admin"
    PLAYER = "player"


class Permission(str, Enum):
    VIEW_ALL_PLAYERS = "view_all_players"
    EDIT_PLAYER_DATA = "edit_player_data"
    MANAGE_TRAINING_PROGRAMS = "manage_training_programs"
    ACCESS_MEDICAL_DATA = "access_medical_data"
    MANAGE_INJURIES = "manage_injuries"
    VIEW_FINANCIAL_DATA = "view_financial_data"
    MANAGE_USERS = "manage_users"
    EXPORT_REPORTS = "export_reports"
    LIVE_MATCH_ANALYTICS = "live_match_analytics"
    TACTICAL_ANALYSIS = "tactical_analysis"
    VIDEO_ANALYSIS = "video_analysis"
    TEAM_COMMUNICATIONS = "team_communications"
    SCHEDULE_MANAGEMENT = "schedule_management"
    PERFORMANCE_ANALYTICS = "performance_analytics"
    AI_INSIGHTS = "ai_insights"
    SQUAD_SELECTION = "squad_selection"


P = Permission

# ======================================================================
# Static tables
# ======================================================================

ROLE_PERMISSIONS: Mapping[Role, frozenset[Permission]] = MappingProxyType({
    Role.HEAD_COACH: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.EDIT_PLAYER_DATA,
        P.MANAGE_TRAINING_PROGRAMS,
        P.ACCESS_MEDICAL_DATA,
        P.EXPORT_REPORTS,
        P.LIVE_MATCH_ANALYTICS,
        P.TACTICAL_ANALYSIS,
        P.VIDEO_ANALYSIS,
        P.TEAM_COMMUNICATIONS,
        P.SCHEDULE_MANAGEMENT,
        P.PERFORMANCE_ANALYTICS,
        P.AI_INSIGHTS,
        P.SQUAD_SELECTION,
    }),
    Role.ASSISTANT_COACH: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.EDIT_PLAYER_DATA,
        P.MANAGE_TRAINING_PROGRAMS,
        P.LIVE_MATCH_ANALYTICS,
        P.TACTICAL_ANALYSIS,
        P.VIDEO_ANALYSIS,
        P.TEAM_COMMUNICATIONS,
        P.PERFORMANCE_ANALYTICS,
        P.AI_INSIGHTS,
    }),
    Role.STRENGTH_COACH: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.EDIT_PLAYER_DATA,
        P.MANAGE_TRAINING_PROGRAMS,
        P.PERFORMANCE_ANALYTICS,
        P.EXPORT_REPORTS,
        P.TEAM_COMMUNICATIONS,
    }),
    Role.MEDICAL_STAFF: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.ACCESS_MEDICAL_DATA,
        P.MANAGE_INJURIES,
        P.EXPORT_REPORTS,
        P.TEAM_COMMUNICATIONS,
        P.PERFORMANCE_ANALYTICS,
    }),
    Role.PHYSIOTHERAPIST: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.ACCESS_MEDICAL_DATA,
        P.MANAGE_INJURIES,
        P.TEAM_COMMUNICATIONS,
        P.PERFORMANCE_ANALYTICS,
    }),
    Role.TEAM_MANAGER: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.SCHEDULE_MANAGEMENT,
        P.TEAM_COMMUNICATIONS,
        P.EXPORT_REPORTS,
        P.VIEW_FINANCIAL_DATA,
    }),
    Role.ANALYST: frozenset({
        P.VIEW_ALL_PLAYERS,
        P.LIVE_MATCH_ANALYTICS,
        P.TACTICAL_ANALYSIS,
        P.VIDEO_ANALYSIS,
        P.PERFORMANCE_ANALYTICS,
        P.AI_INSIGHTS,
        P.EXPORT_REPORTS,
    }),
    Role.ADMIN: frozenset(Permission),
    Role.PLAYER: frozenset({
        P.PERFORMANCE_ANALYTICS,
        P.TEAM_COMMUNICATIONS,
    }),
})

# Higher rank satisfies checks against any lower or equal rank.
ROLE_RANKS: Mapping[Role, int] = MappingProxyType({
    Role.PLAYER: 1,
    Role.PHYSIOTHERAPIST: 2,
    Role.MEDICAL_STAFF: 3,
    Role.ANALYST: 4,
    Role.STRENGTH_COACH: 5,
    Role.TEAM_MANAGER: 5,
    Role.ASSISTANT_COACH: 6,
    Role.HEAD_COACH: 8,
    Role.ADMIN: 10,
})

ROLE_DEPARTMENTS: Mapping[Role, str] = MappingProxyType({
    Role.HEAD_COACH: "Coaching",
    Role.ASSISTANT_COACH: "Coaching",
    Role.STRENGTH_COACH: "Performance",
    Role.MEDICAL_STAFF: "Medical",
    Role.PHYSIOTHERAPIST: "Medical",
    Role.TEAM_MANAGER: "Administration",
    Role.ANALYST: "Performance",
    Role.ADMIN: "Administration",
    Role.PLAYER: "Playing Squad",
})


# ======================================================================
# Coercion
# ======================================================================


def parse_role(value: Role | str) -> Role:
    """Coerce a label to :class:`Role`, raising :class:`InvalidRole`."""
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        raise InvalidRole(value) from None


def parse_permission(value: Permission | str) -> Permission:
    """Coerce a label to :class:`Permission`, raising :class:`InvalidPermission`."""
    if isinstance(value, Permission):
        return value
    try:
        return Permission(value)
    except ValueError:
        raise InvalidPermission(value) from None


# ======================================================================
# Queries
# ======================================================================


def permissions_for(role: Role | str) -> frozenset[Permission]:
    """Return the fixed allow-list for ``role``."""
    return ROLE_PERMISSIONS[parse_role(role)]


def rank_of(role: Role | str) -> int:
    return ROLE_RANKS[parse_role(role)]


def department_for(role: Role | str) -> str:
    return ROLE_DEPARTMENTS[parse_role(role)]


def has_permission(
    role: Role | str,
    permission: Permission | str,
    strict: bool = False,
) -> bool:
    """Whether ``role`` is granted ``permission``.

    Args:
        role: Role label.
        permission: Permission label.
        strict: Re-raise :class:`InvalidRole` / :class:`InvalidPermission`
            instead of logging and denying.
    """
    try:
        granted = permissions_for(role)
        wanted = parse_permission(permission)
    except (InvalidRole, InvalidPermission) as exc:
        if strict:
            raise
        logger.warning("Access denied on invalid input: %s", exc)
        return False
    return wanted in granted


def can_act_as(
    acting_role: Role | str,
    target_role: Role | str,
    strict: bool = False,
) -> bool:
    """Whether ``acting_role`` ranks at least as high as ``target_role``.

    This compares ranks only; it does not merge permission sets.
    """
    try:
        acting = rank_of(acting_role)
        target = rank_of(target_role)
    except InvalidRole as exc:
        if strict:
            raise
        logger.warning("Role escalation denied on invalid input: %s", exc)
        return False
    return acting >= target
