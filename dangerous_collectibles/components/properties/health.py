from dataclasses import dataclass


@dataclass(frozen=True)
class Health:
    """Tracks current and maximum hit points for damage application.

    Attributes:
        health:
            Current hit points. Systems clamp this to ``[0, max_health]``.
        max_health:
            Upper bound for ``health``.
    """

    health: float
    max_health: float
