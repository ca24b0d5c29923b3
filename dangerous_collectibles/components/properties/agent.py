from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Actor on the damageable layer.

    Attributes:
        user_id:
            Identifier the permission system knows the actor by.
    """

    user_id: str
