from typing import List, Sequence

import pytest

from dangerous_collectibles.components import Position
from dangerous_collectibles.registry import Explosion
from dangerous_collectibles.systems.explosion import (
    EXPLOSION_EFFECTS,
    AreaEffectApplicator,
)
from dangerous_collectibles.types import Actor, DamageType
from tests.test_utils import RecordingEffects, RecordingSink, SetExemption, StaticQuery


BLAST = Explosion(chance=100, impact_radius=3.0, damage_amount=20.0)
CENTER = Position(10.0, 0.0, 5.0)


def make_applicator(
    actors: List[Actor], exempt: Sequence[Actor] = ()
) -> tuple[AreaEffectApplicator, StaticQuery, RecordingSink, RecordingEffects]:
    query = StaticQuery(actors)
    sink = RecordingSink()
    effects = RecordingEffects()
    return (
        AreaEffectApplicator(query, sink, effects, SetExemption(exempt)),
        query,
        sink,
        effects,
    )


def test_damages_every_non_exempt_actor_once() -> None:
    applicator, query, sink, _ = make_applicator([1, 2, 3, 4], exempt=[2, 4])
    damaged = applicator.apply(CENTER, BLAST)
    assert sorted(damaged) == [1, 3]
    assert sorted(sink.hits) == [
        (1, 20.0, DamageType.EXPLOSION),
        (3, 20.0, DamageType.EXPLOSION),
    ]
    assert query.calls == [(CENTER, 3.0)]


@pytest.mark.parametrize("order", [[1, 2, 3], [3, 2, 1], [2, 3, 1]])
def test_result_independent_of_query_order(order: List[Actor]) -> None:
    applicator, _, sink, _ = make_applicator(order, exempt=[2])
    applicator.apply(CENTER, BLAST)
    assert sorted(actor for actor, _, _ in sink.hits) == [1, 3]
    assert all(amount == 20.0 for _, amount, _ in sink.hits)


def test_plays_explosion_effects_at_position() -> None:
    applicator, _, _, effects = make_applicator([])
    applicator.apply(CENTER, BLAST)
    assert effects.played == [(effect, CENTER) for effect in EXPLOSION_EFFECTS]


def test_apply_is_not_idempotent() -> None:
    applicator, _, sink, _ = make_applicator([1])
    applicator.apply(CENTER, BLAST)
    applicator.apply(CENTER, BLAST)
    assert sink.hits == [(1, 20.0, DamageType.EXPLOSION)] * 2


def test_none_actors_are_skipped() -> None:
    applicator, _, sink, _ = make_applicator([None, 1])
    applicator.apply(CENTER, BLAST)
    assert sink.hits == [(1, 20.0, DamageType.EXPLOSION)]


class FlakySink(RecordingSink):
    def apply_damage(self, actor: Actor, amount: float, damage_type: DamageType) -> None:
        if actor == 2:
            raise RuntimeError("sink unavailable")
        super().apply_damage(actor, amount, damage_type)


def test_sink_failure_does_not_stop_loop() -> None:
    sink = FlakySink()
    applicator = AreaEffectApplicator(
        StaticQuery([1, 2, 3]), sink, RecordingEffects(), SetExemption()
    )
    damaged = applicator.apply(CENTER, BLAST)
    assert sorted(damaged) == [1, 3]
    assert sorted(actor for actor, _, _ in sink.hits) == [1, 3]


class BrokenEffects:
    def play(self, effect: str, position: Position) -> None:
        raise RuntimeError("no audio device")


def test_effect_failure_is_not_fatal() -> None:
    sink = RecordingSink()
    applicator = AreaEffectApplicator(StaticQuery([1]), sink, BrokenEffects(), SetExemption())
    applicator.apply(CENTER, BLAST)
    assert sink.hits == [(1, 20.0, DamageType.EXPLOSION)]


class BrokenQuery:
    def actors_in_radius(self, position: Position, radius: float) -> List[Actor]:
        raise RuntimeError("physics scene unloaded")


def test_query_failure_applies_nothing() -> None:
    sink = RecordingSink()
    effects = RecordingEffects()
    applicator = AreaEffectApplicator(BrokenQuery(), sink, effects, SetExemption())
    assert applicator.apply(CENTER, BLAST) == []
    assert sink.hits == []
    assert len(effects.played) == len(EXPLOSION_EFFECTS)


def test_zero_damage_still_delivers_hits() -> None:
    applicator, _, sink, _ = make_applicator([1])
    applicator.apply(CENTER, Explosion(chance=100, impact_radius=1.0, damage_amount=0.0))
    assert sink.hits == [(1, 0.0, DamageType.EXPLOSION)]
