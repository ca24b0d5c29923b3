"""Collectible component.

Marks a resource node that an agent can pick up. ``kind`` is the short
prefab name the configured groups match against (e.g. ``"stone-collectable"``).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Collectible:
    kind: str
