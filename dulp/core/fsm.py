from __future__ import annotations

from enum import StrEnum

from statemachine import State, StateMachine


class GamePhase(StrEnum):
    idle = "idle"
    playing = "playing"
    paused = "paused"
    won = "won"
    lost = "lost"


class GameFSM(StateMachine):
    """Guards the controller's phase transitions.

    idle -> playing <-> paused, playing -> won | lost, and any live phase back to idle.
    The controller mutates the session; the FSM only rejects illegal moves.
    """

    idle = State(GamePhase.idle.value, value=GamePhase.idle.value, initial=True)
    playing = State(GamePhase.playing.value, value=GamePhase.playing.value)
    paused = State(GamePhase.paused.value, value=GamePhase.paused.value)
    won = State(GamePhase.won.value, value=GamePhase.won.value)
    lost = State(GamePhase.lost.value, value=GamePhase.lost.value)

    level_started = idle.to(playing)
    pause_requested = playing.to(paused)
    resume_requested = paused.to(playing)
    level_won = playing.to(won)
    level_lost = playing.to(lost)
    session_reset = playing.to(idle) | paused.to(idle) | won.to(idle) | lost.to(idle)

    @property
    def phase(self) -> GamePhase:
        return GamePhase(str(self.current_state.value))
