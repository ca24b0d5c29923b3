"""Position component.

World-space coordinates stored in ``State.position`` keyed by entity id.
Unlike tile coordinates these are floats; ``y`` is the vertical axis.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """World coordinate.

    Attributes:
        x: East/west axis.
        y: Vertical axis.
        z: North/south axis.
    """

    x: float
    y: float = 0.0
    z: float = 0.0
