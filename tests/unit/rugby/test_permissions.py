"""
Unit tests for role-based access control.

Covers the static role tables, permission checks, rank comparison and the
handling of unknown role or permission labels.
"""

import itertools

import pytest

from app.rugby.exceptions import InvalidPermission, InvalidRole
from app.rugby.permissions import (
    ROLE_PERMISSIONS,
    ROLE_RANKS,
    Permission,
    Role,
    can_act_as,
    department_for,
    has_permission,
    parse_permission,
    parse_role,
    permissions_for,
    rank_of,
)


# ======================================================================
# Tables
# ======================================================================


class TestRoleTables:
    """The static role -> permission / rank / department tables."""

    def test_every_role_is_covered(self):
        assert set(ROLE_PERMISSIONS) == set(Role)
        assert set(ROLE_RANKS) == set(Role)
        assert len(Role) == 9
        assert len(Permission) == 16

    @pytest.mark.parametrize("role", list(Role))
    def test_every_role_has_permissions(self, role):
        assert permissions_for(role)

    def test_admin_holds_every_permission(self):
        assert permissions_for(Role.ADMIN) == frozenset(Permission)

    def test_admin_is_the_unique_top_rank(self):
        top = max(ROLE_RANKS.values())
        assert [r for r, rank in ROLE_RANKS.items() if rank == top] == [Role.ADMIN]

    def test_player_permissions(self):
        assert permissions_for(Role.PLAYER) == {
            Permission.PERFORMANCE_ANALYTICS,
            Permission.TEAM_COMMUNICATIONS,
        }

    def test_only_admin_manages_users(self):
        managers = [r for r in Role if Permission.MANAGE_USERS in permissions_for(r)]
        assert managers == [Role.ADMIN]

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            ROLE_PERMISSIONS[Role.PLAYER] = frozenset(Permission)
        with pytest.raises(TypeError):
            ROLE_RANKS[Role.PLAYER] = 99

    def test_lookups_are_stable(self):
        assert permissions_for(Role.ANALYST) is permissions_for("analyst")
        assert rank_of(Role.HEAD_COACH) == rank_of("head_coach") == 8

    @pytest.mark.parametrize("role,department", [
        (Role.HEAD_COACH, "Coaching"),
        (Role.STRENGTH_COACH, "Performance"),
        (Role.PHYSIOTHERAPIST, "Medical"),
        (Role.TEAM_MANAGER, "Administration"),
        (Role.PLAYER, "Playing Squad"),
    ])
    def test_departments(self, role, department):
        assert department_for(role) == department


# ======================================================================
# Parsing
# ======================================================================


class TestParsing:

    def test_parse_role_accepts_labels(self):
        assert parse_role("physiotherapist") is Role.PHYSIOTHERAPIST
        assert parse_role(Role.ADMIN) is Role.ADMIN

    def test_parse_role_rejects_unknown(self):
        with pytest.raises(InvalidRole) as exc_info:
            parse_role("kit_manager")
        assert exc_info.value.value == "kit_manager"

    def test_parse_permission_rejects_unknown(self):
        with pytest.raises(InvalidPermission):
            parse_permission("launch_rockets")

    def test_invalid_role_is_a_value_error(self):
        with pytest.raises(ValueError):
            permissions_for("kit_manager")


# ======================================================================
# has_permission
# ======================================================================


class TestHasPermission:

    @pytest.mark.parametrize("role,permission", list(itertools.product(Role, Permission)))
    def test_matches_table_membership(self, role, permission):
        assert has_permission(role, permission) == (permission in ROLE_PERMISSIONS[role])

    def test_accepts_string_labels(self):
        assert has_permission("medical_staff", "manage_injuries")
        assert not has_permission("player", "view_all_players")

    def test_unknown_role_is_denied(self):
        assert has_permission("kit_manager", Permission.VIEW_ALL_PLAYERS) is False

    def test_unknown_permission_is_denied(self):
        assert has_permission(Role.ADMIN, "launch_rockets") is False

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidRole):
            has_permission("kit_manager", Permission.VIEW_ALL_PLAYERS, strict=True)
        with pytest.raises(InvalidPermission):
            has_permission(Role.ADMIN, "launch_rockets", strict=True)


# ======================================================================
# can_act_as
# ======================================================================


class TestCanActAs:

    @pytest.mark.parametrize("role", list(Role))
    def test_reflexive(self, role):
        assert can_act_as(role, role)

    @pytest.mark.parametrize("role", list(Role))
    def test_admin_can_act_as_anyone(self, role):
        assert can_act_as(Role.ADMIN, role)

    def test_player_cannot_act_as_head_coach(self):
        assert not can_act_as(Role.PLAYER, Role.HEAD_COACH)

    def test_head_coach_can_act_as_analyst(self):
        assert can_act_as(Role.HEAD_COACH, Role.ANALYST)

    def test_equal_ranks_act_as_each_other(self):
        assert can_act_as(Role.STRENGTH_COACH, Role.TEAM_MANAGER)
        assert can_act_as(Role.TEAM_MANAGER, Role.STRENGTH_COACH)

    def test_rank_check_does_not_merge_permissions(self):
        # Head coach outranks team manager but still lacks its financial access.
        assert can_act_as(Role.HEAD_COACH, Role.TEAM_MANAGER)
        assert not has_permission(Role.HEAD_COACH, Permission.VIEW_FINANCIAL_DATA)

    @pytest.mark.parametrize("acting,target", [
        ("kit_manager", "player"),
        ("admin", "kit_manager"),
    ])
    def test_unknown_role_is_denied(self, acting, target):
        assert can_act_as(acting, target) is False

    def test_strict_mode_raises(self):
        with pytest.raises(InvalidRole):
            can_act_as("kit_manager", Role.PLAYER, strict=True)
