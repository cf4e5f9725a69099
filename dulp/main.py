from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from dulp.api.routes import router
from dulp.config import get_log_level, load_env
from dulp.runtime import init_game, shutdown_game

load_env()

# Configure logging
logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    init_game()
    logger.info("Game ready")
    yield
    # Stop the tick before the loop goes away.
    shutdown_game()


app = FastAPI(title="dulp", version="0.1.0", lifespan=lifespan)
app.include_router(router)


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "dulp", "version": "0.1.0"}
