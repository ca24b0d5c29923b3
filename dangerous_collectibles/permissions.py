"""Permission bookkeeping and the permission-backed exemption provider.

Holders of :data:`IGNORE_PERMISSION` are unaffected by dangerous
collectibles: their own pickups never detonate and other players' explosions
do not damage them. Permissions are registered once at startup with
:func:`register_permissions` and live for the rest of the process.
"""

import logging
from typing import Callable, Dict, Optional, Set

from dangerous_collectibles.types import Actor


logger = logging.getLogger(__name__)

IGNORE_PERMISSION = "dangerouscollectibles.ignore"

PERMISSIONS = (IGNORE_PERMISSION,)


class PermissionRegistry:
    """In-memory permission store keyed by user id."""

    def __init__(self) -> None:
        self._owners: Dict[str, str] = {}
        self._grants: Dict[str, Set[str]] = {}

    def register_permission(self, name: str, owner: str) -> None:
        if name in self._owners:
            return
        self._owners[name] = owner
        logger.debug("Registered permission %s for %s", name, owner)

    def is_registered(self, name: str) -> bool:
        return name in self._owners

    def grant(self, user_id: str, name: str) -> None:
        if name not in self._owners:
            raise KeyError(f"Permission {name!r} is not registered")
        self._grants.setdefault(user_id, set()).add(name)

    def revoke(self, user_id: str, name: str) -> None:
        self._grants.get(user_id, set()).discard(name)

    def user_has_permission(self, user_id: str, name: str) -> bool:
        return name in self._grants.get(user_id, ())


def register_permissions(registry: PermissionRegistry, owner: str) -> None:
    """Register every permission this plugin declares."""
    for name in PERMISSIONS:
        registry.register_permission(name, owner)


class PermissionExemption:
    """Exemption provider backed by a :class:`PermissionRegistry`.

    Arguments:
        registry:
            Permission store to consult.
        user_id_of:
            Resolves an actor to the user id the registry knows it by;
            returns ``None`` for actors without one (never exempt).
        permission:
            Permission that grants exemption.
    """

    def __init__(
        self,
        registry: PermissionRegistry,
        user_id_of: Callable[[Actor], Optional[str]] = str,
        permission: str = IGNORE_PERMISSION,
    ) -> None:
        self.registry = registry
        self.user_id_of = user_id_of
        self.permission = permission

    def is_exempt(self, actor: Actor) -> bool:
        user_id = self.user_id_of(actor)
        if user_id is None:
            return False
        return self.registry.user_has_permission(user_id, self.permission)
