"""Pickup system.

Host-side handling of a single collectible pickup in the reference world:
build the :class:`PickupEvent` from the current state, let the trigger engine
decide, and act on the returned :class:`Disposition`. A ``CONSUME`` outcome
takes the collectible out of the world (the node was destroyed by its own
explosion); ``IGNORE`` leaves it in place for the host's normal pickup flow.
"""

from dataclasses import replace
from dangerous_collectibles.engine import PickupEvent, TriggerEngine
from dangerous_collectibles.state import State
from dangerous_collectibles.types import Disposition, EntityID
from dangerous_collectibles.utils.gc import remove_entity
from dangerous_collectibles.world import StateWorld


def pickup_event(state: State, agent_id: EntityID, collectible_id: EntityID) -> PickupEvent:
    """Describe ``agent_id`` picking up ``collectible_id`` in ``state``.

    Missing components become ``None`` fields, which the engine ignores.
    """
    collectible = state.collectible.get(collectible_id)
    return PickupEvent(
        kind=collectible.kind if collectible is not None else None,
        position=state.position.get(collectible_id),
        actor=agent_id if agent_id in state.agent else None,
    )


def remove_collectible(state: State, collectible_id: EntityID) -> State:
    """Return ``state`` with the collectible and its components removed."""
    return remove_entity(state, collectible_id)


def pickup_system(
    world: StateWorld,
    engine: TriggerEngine,
    agent_id: EntityID,
    collectible_id: EntityID,
) -> Disposition:
    """Process one pickup against ``world`` and advance its state.

    Arguments:
        world:
            Host world; its state is replaced as damage is applied.
        engine:
            Trigger engine wired to ``world``.
        agent_id:
            Agent performing the pickup.
        collectible_id:
            Collectible being picked up.

    Returns:
        Disposition
            The engine's decision.
    """
    disposition = engine.on_pickup(pickup_event(world.state, agent_id, collectible_id))
    state = world.state
    if disposition == Disposition.CONSUME:
        state = remove_collectible(state, collectible_id)
    world.state = replace(state, turn=state.turn + 1)
    return disposition
