"""Dead marker component.

Set once an agent's health reaches zero. Dead agents are no longer on the
damageable layer, so later explosions skip them.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dead:
    """Marker (no data)."""

    pass
