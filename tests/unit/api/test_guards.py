"""
Unit tests for the authorization guards endpoints call before any work.
"""

import pytest
from fastapi import HTTPException

from app.api.dependencies import require_permission, require_rank, require_self_or_permission
from app.core.config import settings
from app.models.user import User
from app.rugby.exceptions import InvalidRole
from app.rugby.permissions import Permission, Role


def _user(role: str, user_id: int = 1) -> User:
    return User(id=user_id, email=f"{role}@northharbour.co.nz", hashed_password="x", role=role)


class TestRequirePermission:

    def test_granted(self):
        require_permission(_user("physiotherapist"), Permission.ACCESS_MEDICAL_DATA)

    def test_denied(self):
        with pytest.raises(HTTPException) as exc_info:
            require_permission(_user("analyst"), Permission.ACCESS_MEDICAL_DATA)
        assert exc_info.value.status_code == 403
        assert exc_info.value.detail == "Permission denied: access_medical_data"

    def test_unknown_stored_role_is_denied(self, monkeypatch):
        monkeypatch.setattr(settings, "DEBUG", False)
        monkeypatch.setattr(settings, "PERMISSIONS_STRICT", False)
        with pytest.raises(HTTPException) as exc_info:
            require_permission(_user("kit_manager"), Permission.TEAM_COMMUNICATIONS)
        assert exc_info.value.status_code == 403

    def test_unknown_stored_role_raises_in_debug(self, monkeypatch):
        monkeypatch.setattr(settings, "DEBUG", True)
        monkeypatch.setattr(settings, "PERMISSIONS_STRICT", False)
        with pytest.raises(InvalidRole):
            require_permission(_user("kit_manager"), Permission.TEAM_COMMUNICATIONS)

    def test_unknown_stored_role_raises_when_strict(self, monkeypatch):
        monkeypatch.setattr(settings, "DEBUG", False)
        monkeypatch.setattr(settings, "PERMISSIONS_STRICT", True)
        with pytest.raises(InvalidRole):
            require_rank(_user("kit_manager"), Role.PLAYER)


class TestRequireSelfOrPermission:

    def test_self(self):
        require_self_or_permission(_user("player", user_id=7), 7, Permission.VIEW_ALL_PLAYERS)

    def test_other_without_permission(self):
        with pytest.raises(HTTPException):
            require_self_or_permission(_user("player", user_id=7), 8, Permission.VIEW_ALL_PLAYERS)

    def test_other_with_permission(self):
        require_self_or_permission(_user("team_manager", user_id=7), 8, Permission.VIEW_ALL_PLAYERS)


class TestRequireRank:

    @pytest.mark.parametrize("acting,target", [
        ("admin", Role.HEAD_COACH),
        ("head_coach", "analyst"),
        ("team_manager", Role.STRENGTH_COACH),
    ])
    def test_allowed(self, acting, target):
        require_rank(_user(acting), target)

    @pytest.mark.parametrize("acting,target", [
        ("player", Role.HEAD_COACH),
        ("analyst", "assistant_coach"),
        ("head_coach", Role.ADMIN),
    ])
    def test_denied(self, acting, target):
        with pytest.raises(HTTPException) as exc_info:
            require_rank(_user(acting), target)
        assert exc_info.value.status_code == 403
