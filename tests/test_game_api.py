from __future__ import annotations

from fastapi.testclient import TestClient

from dulp.core.game_loop import TICK_PERIOD_MS
from dulp.core.scheduling import VirtualClock


def test_healthcheck_and_info(client: TestClient) -> None:
    assert client.get("/healthcheck").json() == {"status": "ok"}
    assert client.get("/info").json()["name"] == "dulp"


def test_idle_snapshot(client: TestClient) -> None:
    resp = client.get("/game")
    assert resp.status_code == 200
    data = resp.json()
    assert data["phase"] == "idle"
    assert data["level_number"] is None
    assert data["screen"] == "start"
    assert data["remaining_sectors"] == 0


def test_levels_listing(client: TestClient) -> None:
    levels = client.get("/levels").json()["levels"]
    assert [lv["number"] for lv in levels] == [1, 2, 3]
    assert levels[1]["sector_count"] == 5


def test_start_and_win_over_http(client: TestClient, clock: VirtualClock) -> None:
    resp = client.post("/game/start", json={"level_number": 1})
    assert resp.status_code == 200
    data = resp.json()
    assert data["phase"] == "playing"
    assert data["remaining_sectors"] == 1
    assert data["location"] == "#level/1"

    assert client.post("/game/fire").json() == {"armed": True}
    assert client.post("/game/fire").json() == {"armed": False}

    clock.advance(TICK_PERIOD_MS * 4)

    data = client.get("/game").json()
    assert data["phase"] == "won"
    assert data["outcome"] == "won"
    assert data["screen"] == "win"
    assert data["remaining_sectors"] == 0
    assert data["location"] == "#level/1/win"


def test_start_unknown_level_is_404(client: TestClient) -> None:
    resp = client.post("/game/start", json={"level_number": 99})
    assert resp.status_code == 404
    assert client.get("/game").json()["phase"] == "idle"


def test_start_rejects_invalid_level_number(client: TestClient) -> None:
    assert client.post("/game/start", json={"level_number": 0}).status_code == 422


def test_pause_resume_reset(client: TestClient) -> None:
    client.post("/game/start", json={"level_number": 2})

    data = client.post("/game/pause").json()
    assert data["phase"] == "paused"
    assert data["is_paused"] is True
    assert client.post("/game/fire").json() == {"armed": False}

    data = client.post("/game/resume").json()
    assert data["phase"] == "playing"

    data = client.post("/game/reset").json()
    assert data["phase"] == "idle"
    assert data["remaining_sectors"] == 0


def test_menu_actions_over_http(client: TestClient) -> None:
    data = client.post("/game/actions/newgame").json()
    assert data["level_number"] == 1

    assert client.post("/game/actions/jump").status_code == 422

    data = client.post("/game/actions/exit").json()
    assert data["phase"] == "idle"
    assert data["screen"] == "start"


def test_exit_win_over_http_needs_a_won_level(client: TestClient, clock: VirtualClock, redis_store) -> None:  # type: ignore[no-untyped-def]
    client.post("/game/start", json={"level_number": 2})
    client.post("/game/fire")
    clock.advance(TICK_PERIOD_MS * 4)
    assert client.get("/game").json()["phase"] == "lost"

    assert client.post("/game/actions/exit-win").status_code == 422
    assert redis_store.get("dulp:levelNumber") is None


def test_continue_and_restore(client: TestClient, redis_store) -> None:  # type: ignore[no-untyped-def]
    redis_store.set("dulp:levelNumber", "3")
    data = client.post("/game/continue").json()
    assert data["level_number"] == 3

    data = client.post("/game/restore", json={"level": 2}).json()
    assert data["phase"] == "paused"
    assert data["location"] == "#level/2/paused"

    assert client.post("/game/restore", json={"level": 50}).status_code == 404
