"""Plugin composition root.

Wires configuration, permissions and the reference world into a
:class:`TriggerEngine`. All state lives on the plugin instance; nothing is
kept in module globals, so several plugins (e.g. one per test) can coexist.
"""

import logging
from typing import Optional

from dangerous_collectibles.config import PathLike, load_registry, reload_registry
from dangerous_collectibles.engine import TriggerEngine
from dangerous_collectibles.permissions import (
    PermissionExemption,
    PermissionRegistry,
    register_permissions,
)
from dangerous_collectibles.systems.explosion import AreaEffectApplicator
from dangerous_collectibles.systems.pickup import pickup_system
from dangerous_collectibles.types import Disposition, EntityID, RandomSource
from dangerous_collectibles.world import StateWorld


logger = logging.getLogger(__name__)

PLUGIN_NAME = "DangerousCollectibles"


class DangerousCollectiblesPlugin:
    """Adds a chance for collectibles to explode when picked up."""

    def __init__(
        self,
        config_path: PathLike,
        world: StateWorld,
        permissions: PermissionRegistry,
        random_source: Optional[RandomSource] = None,
    ) -> None:
        self.config_path = config_path
        self.world = world
        self.permissions = permissions
        self.random_source = random_source
        self.engine: Optional[TriggerEngine] = None

    def init(self) -> None:
        """Register permissions, load configuration and build the engine.

        Raises:
            ConfigError: If the configuration file is invalid.
        """
        register_permissions(self.permissions, PLUGIN_NAME)
        registry = load_registry(self.config_path)
        exemption = PermissionExemption(self.permissions, self.world.user_id_of)
        applicator = AreaEffectApplicator(
            spatial_query=self.world,
            damage_sink=self.world,
            effect_player=self.world,
            exemption=exemption,
        )
        self.engine = TriggerEngine(registry, applicator, exemption, self.random_source)
        logger.info(
            "%s loaded %d collectible groups covering %d kinds",
            PLUGIN_NAME,
            len(registry),
            len(registry.kinds),
        )

    def reload(self) -> bool:
        if self.engine is None:
            return False
        return reload_registry(self.engine, self.config_path)

    def unload(self) -> None:
        self.engine = None

    def on_collectible_pickup(
        self, agent_id: EntityID, collectible_id: EntityID
    ) -> Optional[Disposition]:
        """Host hook; ``None`` while the plugin is not loaded."""
        if self.engine is None:
            return None
        return pickup_system(self.world, self.engine, agent_id, collectible_id)
