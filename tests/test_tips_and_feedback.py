import logging
import random
from datetime import datetime

from klinecamp.core.enums import SoundCue
from klinecamp.core.interfaces import SoundPlayer
from klinecamp.core.event_bus import EventBus
from klinecamp.core.events import ClickEvent
from klinecamp.feedback import NullSoundPlayer, RecordingSoundPlayer, SoundFeedback
from klinecamp.tips import DEFAULT_TIP, EMPTY_TIP, ERROR_TIP, STATIC_TIPS, FallbackTipProvider, StaticTipProvider


def test_fallback_tip_without_source() -> None:
    assert FallbackTipProvider().tip() == DEFAULT_TIP
    assert FallbackTipProvider(unavailable="x").tip() == "x"


def test_fallback_tip_when_source_fails(caplog) -> None:
    def broken() -> str:
        raise ConnectionError("service down")

    with caplog.at_level(logging.WARNING):
        assert FallbackTipProvider(broken).tip() == ERROR_TIP
    assert "fallback" in caplog.text


def test_fallback_tip_passes_through_and_handles_empty() -> None:
    assert FallbackTipProvider(lambda: "  顺势而为  ").tip() == "顺势而为"
    assert FallbackTipProvider(lambda: None).tip() == EMPTY_TIP


def test_static_tips() -> None:
    assert StaticTipProvider(rng=random.Random(1)).tip() in STATIC_TIPS


def test_mute_toggle() -> None:
    player = RecordingSoundPlayer()
    assert player.toggle_mute() is True
    player.play(SoundCue.CLICK)
    assert player.played == []
    assert player.toggle_mute() is False
    player.play(SoundCue.CLICK)
    assert player.played == [SoundCue.CLICK]
    assert NullSoundPlayer().toggle_mute() is True


def test_failing_player_never_breaks_dispatch() -> None:
    class Broken(SoundPlayer):
        def play(self, cue: SoundCue) -> None:
            raise RuntimeError("no audio device")

        def toggle_mute(self) -> bool:
            return False

    bus = EventBus()
    feedback = SoundFeedback(Broken())
    feedback.bind(bus)
    feedback.on_start()
    bus.emit(ClickEvent(timestamp=datetime(2024, 1, 1), action="play"))
    assert bus.pending == 0
