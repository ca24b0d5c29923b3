"""Collectible group registry.

A :class:`Registry` is the immutable, ordered list of configured
:class:`CollectibleGroup` s. Each group maps a set of collectible kinds to one
:class:`Explosion` profile plus a removal policy.

A kind may legally appear in more than one group. Only the *first* group in
configured order governs a pickup of that kind; later groups listing the
same kind are never consulted for it. The registry precomputes a
kind -> group index map at construction so :meth:`Registry.find_group` is a
single dictionary lookup while keeping exactly the semantics of a linear scan.

Registries are never mutated. Reloading configuration builds a new
``Registry`` and swaps the reference (see
:meth:`dangerous_collectibles.engine.TriggerEngine.reload`).
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional
from pyrsistent import PMap, pmap, pset, pvector
from pyrsistent.typing import PSet, PVector


@dataclass(frozen=True)
class Explosion:
    """Explosion profile.

    Attributes:
        chance: Percent probability in ``[0, 100]`` that a pickup detonates.
        impact_radius: World-space radius of the blast, strictly positive.
        damage_amount: Flat damage dealt to every eligible actor in range.
    """

    chance: int
    impact_radius: float
    damage_amount: float

    def __post_init__(self) -> None:
        if not 0 <= self.chance <= 100:
            raise ValueError(f"Explosion chance must be in [0, 100]: {self.chance}")
        if not self.impact_radius > 0:
            raise ValueError(
                f"Explosion impact radius must be positive: {self.impact_radius}"
            )
        if not self.damage_amount >= 0:
            raise ValueError(
                f"Explosion damage must be non-negative: {self.damage_amount}"
            )


@dataclass(frozen=True)
class CollectibleGroup:
    """Set of collectible kinds sharing one explosion profile."""

    kinds: PSet[str]
    remove_on_explosion: bool
    explosion: Explosion


def make_group(
    kinds: Iterable[str], remove_on_explosion: bool, explosion: Explosion
) -> CollectibleGroup:
    """Build a group from any iterable of kinds (duplicates collapse)."""
    return CollectibleGroup(
        kinds=pset(kinds),
        remove_on_explosion=remove_on_explosion,
        explosion=explosion,
    )


def _first_match_index(groups: PVector[CollectibleGroup]) -> PMap[str, int]:
    index: dict[str, int] = {}
    for i, group in enumerate(groups):
        for kind in group.kinds:
            index.setdefault(kind, i)
    return pmap(index)


@dataclass(frozen=True)
class Registry:
    """Ordered, immutable collection of collectible groups."""

    groups: PVector[CollectibleGroup] = pvector()
    _index: PMap[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        groups = pvector(self.groups)
        object.__setattr__(self, "groups", groups)
        object.__setattr__(self, "_index", _first_match_index(groups))

    @classmethod
    def from_groups(cls, groups: Iterable[CollectibleGroup]) -> "Registry":
        return cls(groups=pvector(groups))

    def find_group(self, kind: str) -> Optional[CollectibleGroup]:
        """Return the first configured group containing ``kind``, if any."""
        i = self._index.get(kind)
        if i is None:
            return None
        return self.groups[i]

    @property
    def kinds(self) -> PSet[str]:
        """Every kind matched by at least one group."""
        return pset(self._index.keys())

    def __len__(self) -> int:
        return len(self.groups)
