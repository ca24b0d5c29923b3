"""Configuration file loading, versioning and registry construction.

The configuration is a JSON document with human-readable keys::

    {
      "Version": "1.0.1",
      "Collectibles": [
        {
          "Prefab Short Names": ["stone-collectable", "metal-collectable"],
          "Remove Collectible Upon Explosion": true,
          "Explosion": {"Chance": 10, "Impact Radius": 3.0, "Damage Amount": 20.0}
        }
      ]
    }

Files are validated with pydantic when loaded, so an out-of-range chance, a
non-positive radius or negative damage is rejected here and never reaches the
trigger engine. Files written by an older version are migrated and saved back.
"""

import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import BaseModel, Field, ValidationError

from dangerous_collectibles.engine import TriggerEngine
from dangerous_collectibles.registry import Explosion, Registry, make_group


logger = logging.getLogger(__name__)

CONFIG_VERSION = "1.0.1"

# Configs older than this are discarded in favor of the defaults.
MIN_COMPATIBLE_VERSION = "1.0.0"

PathLike = Union[str, Path]


class ConfigError(Exception):
    """Raised when a configuration file cannot be read, written or is invalid."""


class ExplosionConfig(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    chance: int = Field(alias="Chance", ge=0, le=100)
    impact_radius: float = Field(alias="Impact Radius", gt=0.0)
    damage_amount: float = Field(alias="Damage Amount", ge=0.0)


class CollectibleConfig(BaseModel):
    """One collectible group: kinds sharing an explosion profile."""

    model_config = {"frozen": True, "populate_by_name": True}

    prefab_short_names: List[str] = Field(alias="Prefab Short Names")
    remove_collectible_upon_explosion: bool = Field(
        alias="Remove Collectible Upon Explosion"
    )
    explosion: ExplosionConfig = Field(alias="Explosion")


class Configuration(BaseModel):
    model_config = {"frozen": True, "populate_by_name": True}

    version: str = Field(default="0.0.0", alias="Version")
    collectibles: List[CollectibleConfig] = Field(alias="Collectibles")


def _default_explosion() -> ExplosionConfig:
    return ExplosionConfig(chance=10, impact_radius=3.0, damage_amount=20.0)


def default_config() -> Configuration:
    """Return the shipped configuration."""
    return Configuration(
        version=CONFIG_VERSION,
        collectibles=[
            CollectibleConfig(
                prefab_short_names=[
                    "stone-collectable",
                    "metal-collectable",
                    "sulfur-collectable",
                    "wood-collectable",
                ],
                remove_collectible_upon_explosion=True,
                explosion=_default_explosion(),
            ),
            CollectibleConfig(
                prefab_short_names=[
                    "corn-collectable",
                    "hemp-collectable",
                    "potato-collectable",
                    "pumpkin-collectable",
                    "mushroom-cluster-5",
                    "mushroom-cluster-6",
                ],
                remove_collectible_upon_explosion=True,
                explosion=_default_explosion(),
            ),
            CollectibleConfig(
                prefab_short_names=["hemp-collectable"],
                remove_collectible_upon_explosion=True,
                explosion=_default_explosion(),
            ),
        ],
    )


def version_tuple(version: str) -> Tuple[int, ...]:
    """Parse ``"1.0.1"`` into ``(1, 0, 1)``; non-numeric parts count as 0."""
    parts: List[int] = []
    for part in version.split("."):
        try:
            parts.append(int(part))
        except ValueError:
            parts.append(0)
    return tuple(parts)


def is_outdated(config: Configuration) -> bool:
    return version_tuple(config.version) < version_tuple(CONFIG_VERSION)


def update_config(config: Configuration) -> Configuration:
    """Migrate ``config`` to :data:`CONFIG_VERSION`."""
    logger.warning("Config changes detected! Updating...")
    previous = config.version
    if version_tuple(config.version) < version_tuple(MIN_COMPATIBLE_VERSION):
        config = default_config()
    config = config.model_copy(update={"version": CONFIG_VERSION})
    logger.warning(
        "Config update complete! Updated from version %s to %s",
        previous,
        CONFIG_VERSION,
    )
    return config


def save_config(config: Configuration, path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(config.model_dump(by_alias=True), indent=2) + "\n",
        encoding="utf-8",
    )


def _save_or_raise(config: Configuration, path: Path) -> None:
    try:
        save_config(config, path)
    except OSError as exc:
        raise ConfigError(f"Cannot write configuration {path}: {exc}") from exc


def load_config(path: PathLike) -> Configuration:
    """Load, validate and (if needed) migrate the configuration at ``path``.

    A missing file is created with :func:`default_config`.

    Raises:
        ConfigError: If the file cannot be read or written, is not JSON or
            fails validation.
    """
    path = Path(path)
    if not path.exists():
        logger.info("No config at %s; writing defaults", path)
        config = default_config()
        _save_or_raise(config, path)
        return config

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        config = Configuration.model_validate(data)
    except (OSError, ValueError, ValidationError) as exc:
        raise ConfigError(f"Invalid configuration {path}: {exc}") from exc

    if is_outdated(config):
        config = update_config(config)
        _save_or_raise(config, path)
    return config


def build_registry(config: Configuration) -> Registry:
    """Convert a validated configuration into a :class:`Registry`, keeping group order."""
    return Registry.from_groups(
        make_group(
            group.prefab_short_names,
            group.remove_collectible_upon_explosion,
            Explosion(
                chance=group.explosion.chance,
                impact_radius=group.explosion.impact_radius,
                damage_amount=group.explosion.damage_amount,
            ),
        )
        for group in config.collectibles
    )


def load_registry(path: PathLike) -> Registry:
    return build_registry(load_config(path))


def reload_registry(engine: TriggerEngine, path: PathLike) -> bool:
    """Reload ``path`` into ``engine``.

    Returns:
        bool
            ``True`` if the new registry is active, ``False`` if the file was
            refused and the previous registry is kept.
    """
    try:
        registry = load_registry(path)
    except ConfigError as exc:
        logger.warning("Config reload refused, keeping previous registry: %s", exc)
        return False
    engine.reload(registry)
    return True
