from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, WebSocket, WebSocketDisconnect, status

from dulp.actions import dispatch_menu_action, restore_location
from dulp.api.deps import get_current_game
from dulp.api.models import FireResponse, GameSnapshot, LevelInfo, LevelListResponse, RestoreRequest, StartRequest
from dulp.core.errors import UnknownLevel
from dulp.game import Game
from dulp.websocket_hub import hub

router = APIRouter()


def _snapshot(game: Game) -> GameSnapshot:
    return GameSnapshot.model_validate(game.snapshot())


@router.websocket("/ws/game")
async def game_screen_ws(websocket: WebSocket) -> None:
    await hub.connect(websocket)

    try:
        # Keep the socket open; client can optionally send pings.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        await hub.disconnect(websocket)
    except Exception:
        await hub.disconnect(websocket)
        raise


@router.get("/healthcheck")
async def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/levels", response_model=LevelListResponse)
async def list_levels_route(game: Game = Depends(get_current_game)) -> LevelListResponse:
    catalog = game.controller.catalog
    return LevelListResponse(
        levels=[
            LevelInfo(number=lv.number, sector_count=lv.sector_count, rotation_speed=lv.rotation_speed)
            for lv in catalog.by_number.values()
        ]
    )


@router.get("/game", response_model=GameSnapshot)
async def get_game_route(game: Game = Depends(get_current_game)) -> GameSnapshot:
    return _snapshot(game)


@router.post("/game/start", response_model=GameSnapshot)
async def start_route(payload: StartRequest, game: Game = Depends(get_current_game)) -> GameSnapshot:
    try:
        game.controller.start(payload.level_number)
    except UnknownLevel as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _snapshot(game)


@router.post("/game/fire", response_model=FireResponse)
async def fire_route(game: Game = Depends(get_current_game)) -> FireResponse:
    # Stray or repeated presses are expected and simply report armed=False.
    return FireResponse(armed=game.controller.arm())


@router.post("/game/pause", response_model=GameSnapshot)
async def pause_route(game: Game = Depends(get_current_game)) -> GameSnapshot:
    game.controller.pause()
    return _snapshot(game)


@router.post("/game/resume", response_model=GameSnapshot)
async def resume_route(game: Game = Depends(get_current_game)) -> GameSnapshot:
    game.controller.resume()
    return _snapshot(game)


@router.post("/game/reset", response_model=GameSnapshot)
async def reset_route(game: Game = Depends(get_current_game)) -> GameSnapshot:
    game.controller.reset()
    return _snapshot(game)


@router.post("/game/continue", response_model=GameSnapshot)
async def continue_route(game: Game = Depends(get_current_game)) -> GameSnapshot:
    game.controller.resume_from_saved_level()
    return _snapshot(game)


@router.post("/game/restore", response_model=GameSnapshot)
async def restore_route(payload: RestoreRequest, game: Game = Depends(get_current_game)) -> GameSnapshot:
    try:
        restore_location(game, {"level": payload.level})
    except UnknownLevel as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return _snapshot(game)


@router.post("/game/actions/{action}", response_model=GameSnapshot)
async def menu_action_route(action: str, game: Game = Depends(get_current_game)) -> GameSnapshot:
    try:
        dispatch_menu_action(game, action)
    except UnknownLevel as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e)) from e
    return _snapshot(game)
