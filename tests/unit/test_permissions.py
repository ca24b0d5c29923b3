import pytest

from dangerous_collectibles.permissions import (
    IGNORE_PERMISSION,
    PermissionExemption,
    PermissionRegistry,
    register_permissions,
)


def test_register_permissions_registers_ignore() -> None:
    registry = PermissionRegistry()
    assert not registry.is_registered(IGNORE_PERMISSION)
    register_permissions(registry, "DangerousCollectibles")
    assert registry.is_registered(IGNORE_PERMISSION)
    # Registering twice is harmless.
    register_permissions(registry, "DangerousCollectibles")
    assert registry.is_registered(IGNORE_PERMISSION)


def test_grant_unregistered_permission_raises() -> None:
    registry = PermissionRegistry()
    with pytest.raises(KeyError):
        registry.grant("76561198000000000", IGNORE_PERMISSION)


def test_grant_and_revoke() -> None:
    registry = PermissionRegistry()
    register_permissions(registry, "DangerousCollectibles")
    registry.grant("alice", IGNORE_PERMISSION)
    assert registry.user_has_permission("alice", IGNORE_PERMISSION)
    assert not registry.user_has_permission("bob", IGNORE_PERMISSION)
    registry.revoke("alice", IGNORE_PERMISSION)
    assert not registry.user_has_permission("alice", IGNORE_PERMISSION)
    registry.revoke("nobody", IGNORE_PERMISSION)


def test_permission_exemption_resolves_user_ids() -> None:
    registry = PermissionRegistry()
    register_permissions(registry, "DangerousCollectibles")
    registry.grant("user-1", IGNORE_PERMISSION)
    users = {1: "user-1", 2: "user-2"}
    exemption = PermissionExemption(registry, users.get)

    assert exemption.is_exempt(1)
    assert not exemption.is_exempt(2)
    # Actors unknown to the resolver are never exempt.
    assert not exemption.is_exempt(3)


def test_permission_exemption_defaults_to_str() -> None:
    registry = PermissionRegistry()
    register_permissions(registry, "DangerousCollectibles")
    registry.grant("42", IGNORE_PERMISSION)
    assert PermissionExemption(registry).is_exempt(42)
