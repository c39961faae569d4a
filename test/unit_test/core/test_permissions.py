"""Unit tests for permission identifiers, role defaults and approval limits."""

import pytest

from tabdeel_pulse.core.permissions import (
    ADMINISTRATOR,
    ALL_PERMISSIONS,
    DEFAULT_ROLES,
    FALLBACK_ROLE_ID,
    MANAGER,
    SYSTEM_ROLE_IDS,
    TECHNICIAN,
    Permission,
    financial_limit,
    has_permission,
    unknown_permissions,
)


class TestHasPermission:
    def test_direct_grant(self):
        assert has_permission(["finance:approve"], Permission.FINANCE_APPROVE)

    def test_missing_grant(self):
        assert not has_permission(["users:read"], Permission.FINANCE_APPROVE)

    def test_system_admin_implies_everything(self):
        assert has_permission(["system:admin"], Permission.USERS_DELETE)
        assert has_permission(["system:admin"], "accounts:update")

    def test_accepts_plain_strings(self):
        assert has_permission({"jobs:assign"}, "jobs:assign")

    def test_empty_grant(self):
        assert not has_permission([], Permission.USERS_READ)


class TestDefaultRoles:
    def test_three_system_roles(self):
        assert {role["id"] for role in DEFAULT_ROLES} == SYSTEM_ROLE_IDS == {ADMINISTRATOR, MANAGER, TECHNICIAN}

    def test_administrator_has_every_permission(self):
        admin = next(role for role in DEFAULT_ROLES if role["id"] == ADMINISTRATOR)
        assert set(admin["permissions"]) == ALL_PERMISSIONS

    def test_manager_can_approve_but_not_reset_passwords(self):
        manager = next(role for role in DEFAULT_ROLES if role["id"] == MANAGER)
        assert Permission.FINANCE_APPROVE.value in manager["permissions"]
        assert Permission.USERS_RESET_PASSWORD.value not in manager["permissions"]

    def test_technician_cannot_approve(self):
        technician = next(role for role in DEFAULT_ROLES if role["id"] == TECHNICIAN)
        assert not has_permission(technician["permissions"], Permission.FINANCE_APPROVE)

    def test_fallback_role_is_technician(self):
        assert FALLBACK_ROLE_ID == TECHNICIAN


@pytest.mark.parametrize(
    "role_id, expected",
    [(ADMINISTRATOR, 100000), (MANAGER, 50000), (TECHNICIAN, 0), ("Auditor", 0), (None, 0)],
)
def test_financial_limit(role_id, expected):
    assert financial_limit(role_id) == expected


def test_unknown_permissions_keeps_input_order():
    assert unknown_permissions(["users:read", "foo:bar", "finance:approve", "baz"]) == ["foo:bar", "baz"]
    assert unknown_permissions(ALL_PERMISSIONS) == []
