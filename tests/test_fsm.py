from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from dulp.core.fsm import GameFSM, GamePhase


def test_fsm_starts_idle() -> None:
    assert GameFSM().phase is GamePhase.idle


def test_fsm_full_round_trip() -> None:
    fsm = GameFSM()
    fsm.send("level_started")
    fsm.send("pause_requested")
    assert fsm.phase is GamePhase.paused
    fsm.send("resume_requested")
    fsm.send("level_won")
    assert fsm.phase is GamePhase.won
    fsm.send("session_reset")
    assert fsm.phase is GamePhase.idle


@pytest.mark.parametrize(
    "events",
    [
        ["pause_requested"],
        ["level_started", "level_started"],
        ["level_started", "level_lost", "level_won"],
        ["level_started", "pause_requested", "level_lost"],
        ["session_reset"],
    ],
)
def test_fsm_rejects_illegal_moves(events: list[str]) -> None:
    fsm = GameFSM()
    *ok, bad = events
    for e in ok:
        fsm.send(e)
    with pytest.raises(TransitionNotAllowed):
        fsm.send(bad)
