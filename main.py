from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging
import random

from config import Settings, get_settings
from core.game_service import GameService
from core.log_config import configure_logging
from services.move_service import RandomMoveSupplier
from api import play, results

logger = logging.getLogger(__name__)


def build_game_service(settings: Settings) -> GameService:
    # random_seed 有設定時，對手出拳序列可重現
    rng = random.Random(settings.random_seed) if settings.random_seed is not None else None
    return GameService(move_supplier=RandomMoveSupplier(rng))


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[GameService] = None,
) -> FastAPI:
    """
    建立 FastAPI 應用

    參數：
        settings: 設定（預設讀環境變數）
        service: GameService（預設依 settings 建立；測試可傳入自己的 instance）
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup: 設定 logging
        configure_logging(settings.log_level, settings.json_logs)
        logger.info(f"{settings.app_name} started")
        yield
        logger.info(f"{settings.app_name} stopped after {len(app.state.game_service)} rounds")

    app = FastAPI(
        title=settings.app_name,
        description="Rock-paper-scissors game evaluation API",
        version="1.0.0",
        lifespan=lifespan
    )
    # GameService 有 __len__，空的 log 會是 falsy，所以要比對 None
    app.state.game_service = service if service is not None else build_game_service(settings)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(play.router)
    app.include_router(results.router)

    @app.get("/")
    def root():
        return {"message": settings.app_name, "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
