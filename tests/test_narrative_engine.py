import random
from dataclasses import replace

import pytest

from klinecamp.core.enums import CashMode
from klinecamp.errors import ConfigurationError
from klinecamp.story import (
    BANKRUPTCY,
    HOSPITAL,
    INITIAL_STATS,
    RANDOM_EVENTS,
    RETIREMENT,
    START_EVENT,
    NarrativeEngine,
    PlayerStats,
    StatDelta,
    StoryChoice,
    StoryEvent,
    apply_delta,
    ending_for,
)


def _event(event_id: str) -> StoryEvent:
    return next(e for e in RANDOM_EVENTS if e.id == event_id)


def test_initial_state() -> None:
    assert INITIAL_STATS == PlayerStats(cash=50_000, health=100, insight=0, reputation=0, turn=1, max_turn=36)
    assert len(RANDOM_EVENTS) == 5
    assert len(START_EVENT.choices) == 2


def test_study_choice_end_to_end() -> None:
    engine = NarrativeEngine(rng=random.Random(1))
    result = engine.step(INITIAL_STATS, START_EVENT.choices[0])
    assert result.stats.cash == 49_500
    assert result.stats.insight == 10
    assert result.stats.health == 100
    assert result.stats.turn == 2
    assert result.cash_delta == -500
    assert not result.next_event.is_ending


def test_bankruptcy_wins_over_hospital() -> None:
    stats = PlayerStats(cash=0, health=0, insight=0, reputation=0, turn=5)
    assert ending_for(stats).id == BANKRUPTCY
    engine = NarrativeEngine(rng=random.Random(0))
    assert engine.select_next_event(stats).event.id == BANKRUPTCY


def test_hospital_when_only_health_collapses() -> None:
    stats = PlayerStats(cash=10, health=0, insight=0, reputation=0, turn=5)
    assert ending_for(stats).id == HOSPITAL


def test_turn_overflow_retires() -> None:
    stats = PlayerStats(cash=1000, health=50, insight=0, reputation=0, turn=37, max_turn=36)
    assert ending_for(stats).id == RETIREMENT
    assert ending_for(replace(stats, turn=36)) is None


def test_endings_are_sinks_with_one_noop_choice() -> None:
    engine = NarrativeEngine(rng=random.Random(0))
    stats = PlayerStats(cash=-5, health=10, insight=0, reputation=0)
    ending = engine.select_next_event(stats)
    assert ending.is_ending
    (choice,) = ending.choices
    assert choice.effect(stats, random.Random()) == StatDelta()


def test_cost_applies_before_absolute_cash_replacement() -> None:
    choice = StoryChoice(
        text="double",
        log_text="",
        cost=1000,
        effect=lambda s, rng: StatDelta.set_cash(s.cash * 2),
    )
    stats = replace(INITIAL_STATS, cash=10_000)
    new_stats, delta = NarrativeEngine(rng=random.Random(0)).apply_choice(stats, choice)
    assert delta.cash_mode is CashMode.ABSOLUTE
    assert new_stats.cash == 18_000


def test_relative_cash_adds() -> None:
    assert StatDelta.add_cash(-2000).apply_cash(5000) == 3000
    assert StatDelta(health=3).apply_cash(5000) == 5000


def test_clamping_is_asymmetric() -> None:
    stats = PlayerStats(cash=100, health=95, insight=5, reputation=98)
    out = apply_delta(stats, StatDelta(health=20, insight=-30, reputation=10))
    assert out.health == 100
    assert out.insight == -25
    assert out.reputation == 100
    assert apply_delta(stats, StatDelta(health=-200)).health == 0


def test_step_is_deterministic_apart_from_next_event() -> None:
    choice = _event("evt_study").choices[1]
    stats = replace(INITIAL_STATS, turn=4, insight=20)
    a = NarrativeEngine(rng=random.Random(1)).step(stats, choice)
    b = NarrativeEngine(rng=random.Random(99)).step(stats, choice)
    assert a.stats == b.stats
    assert a.stats.insight == 28 and a.stats.health == 97 and a.stats.turn == 5


def test_insight_gate_hides_and_cash_gate_locks() -> None:
    crash = _event("evt_market_crash")
    low = replace(INITIAL_STATS, insight=0)
    offered = NarrativeEngine.eligible_choices(low, crash)
    assert [o.index for o in offered] == [0, 1]

    insightful_but_poor = replace(INITIAL_STATS, insight=30, cash=10_000)
    offered = NarrativeEngine.eligible_choices(insightful_but_poor, crash)
    assert [(o.index, o.locked) for o in offered] == [(0, False), (1, False), (2, True)]

    rich = replace(insightful_but_poor, cash=25_000)
    assert not NarrativeEngine.eligible_choices(rich, crash)[2].locked


def test_reputation_gate_locks_without_hiding() -> None:
    guru = _event("evt_guru")
    offered = NarrativeEngine.eligible_choices(INITIAL_STATS, guru)
    assert [(o.index, o.locked) for o in offered] == [(0, False), (1, True)]
    famous = replace(INITIAL_STATS, reputation=30)
    assert not NarrativeEngine.eligible_choices(famous, guru)[1].locked


def test_instance_serials_are_monotonic_and_separate_from_template_id() -> None:
    engine = NarrativeEngine(rng=random.Random(3), events=[_event("evt_guru")])
    start = engine.start()
    assert start.serial == 0 and start.event is START_EVENT
    stats = replace(INITIAL_STATS, turn=2)
    first = engine.select_next_event(stats)
    second = engine.select_next_event(stats)
    assert first.event.id == second.event.id == "evt_guru"
    assert (first.serial, second.serial) == (1, 2)
    assert first.instance_id != second.instance_id
    assert engine.start().serial == 0


def test_explicit_next_event_id_is_followed() -> None:
    study = _event("evt_study")
    choice = StoryChoice(text="go", log_text="", next_event_id="evt_study")
    engine = NarrativeEngine(rng=random.Random(0), events=[_event("evt_guru"), study])
    for _ in range(5):
        assert engine.step(INITIAL_STATS, choice).next_event.event is study


def test_unknown_next_event_id_is_a_configuration_error() -> None:
    choice = StoryChoice(text="go", log_text="", next_event_id="missing")
    with pytest.raises(ConfigurationError):
        NarrativeEngine(rng=random.Random(0)).step(INITIAL_STATS, choice)


def test_engine_needs_events() -> None:
    with pytest.raises(ConfigurationError):
        NarrativeEngine(events=[])


def test_random_effects_draw_from_engine_rng() -> None:
    probe = _event("evt_news_leak").choices[1]
    outcomes = {
        NarrativeEngine(rng=random.Random(seed)).apply_choice(INITIAL_STATS, probe)[0].cash for seed in range(30)
    }
    assert outcomes == {55_000, 48_000}
