import pytest
from pyrsistent import pmap

from dangerous_collectibles.components import Dead, Health, Position
from dangerous_collectibles.utils.health import apply_damage_and_check_death
from dangerous_collectibles.utils.spatial import entities_within_radius


def test_entities_within_radius_inclusive_boundary() -> None:
    store = {
        1: Position(0, 0, 0),
        2: Position(3, 0, 0),
        3: Position(0, 0, 3.01),
        4: Position(1, 1, 1),
    }
    found = entities_within_radius(store, Position(0, 0, 0), 3.0)
    assert sorted(found) == [1, 2, 4]


def test_entities_within_radius_empty_store() -> None:
    assert entities_within_radius({}, Position(0, 0, 0), 10.0) == []


def test_apply_damage_reduces_health() -> None:
    health, dead = apply_damage_and_check_death(
        pmap({1: Health(health=100, max_health=100)}), pmap(), 1, 20.0
    )
    assert health[1].health == 80.0
    assert 1 not in dead


def test_apply_damage_clamps_and_marks_dead() -> None:
    health, dead = apply_damage_and_check_death(
        pmap({1: Health(health=15, max_health=100)}), pmap(), 1, 20.0
    )
    assert health[1].health == 0.0
    assert dead[1] == Dead()


def test_apply_damage_without_health_is_noop() -> None:
    health, dead = apply_damage_and_check_death(pmap(), pmap(), 1, 20.0)
    assert len(health) == 0 and len(dead) == 0


def test_apply_damage_negative_raises() -> None:
    with pytest.raises(ValueError):
        apply_damage_and_check_death(
            pmap({1: Health(health=15, max_health=100)}), pmap(), 1, -1.0
        )
