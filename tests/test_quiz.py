import random

import pytest

from klinecamp.core.enums import SoundCue
from klinecamp.core.event_bus import EventBus
from klinecamp.errors import QuizError
from klinecamp.feedback import RecordingSoundPlayer, SoundFeedback
from klinecamp.quiz import QUESTION_BANK, QuizSession, draw_questions


def test_bank_is_well_formed() -> None:
    assert len(QUESTION_BANK) == 20
    assert len({q.id for q in QUESTION_BANK}) == 20
    for q in QUESTION_BANK:
        assert len(q.options) == 4
        assert 0 <= q.correct_index < 4


def test_draw_questions_without_replacement() -> None:
    drawn = draw_questions(3, rng=random.Random(5))
    assert len(drawn) == 3
    assert len({q.id for q in drawn}) == 3
    assert len(draw_questions(50, rng=random.Random(5))) == 20
    with pytest.raises(ValueError):
        draw_questions(-1)


def test_session_scores_and_plays_cues() -> None:
    bus = EventBus()
    player = RecordingSoundPlayer()
    feedback = SoundFeedback(player)
    feedback.bind(bus)
    feedback.on_start()

    questions = list(QUESTION_BANK[:2])
    session = QuizSession(questions, bus=bus)
    assert session.answer(questions[0].correct_index) is True
    with pytest.raises(QuizError):
        session.answer(0)
    assert session.next() is True

    wrong = (questions[1].correct_index + 1) % 4
    assert session.answer(wrong) is False
    assert session.next() is False

    result = session.result()
    assert (result.total_questions, result.correct_count) == (2, 1)
    assert player.played == [SoundCue.CORRECT, SoundCue.WRONG]


def test_session_rejects_misuse() -> None:
    with pytest.raises(QuizError):
        QuizSession([])
    session = QuizSession(QUESTION_BANK[:1])
    with pytest.raises(QuizError):
        session.next()
    with pytest.raises(QuizError):
        session.answer(4)
