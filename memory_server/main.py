"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, WebSocket
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .api.routes import router as api_router, init_dependencies
from .api.websocket import websocket_endpoint
from .game import GameSessionManager


logger = logging.getLogger(__name__)

# Global instances
session_manager: GameSessionManager = None


def configure_logging() -> None:
    """Configure the root logger from settings."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global session_manager

    # Startup
    configure_logging()
    session_manager = GameSessionManager()
    init_dependencies(session_manager)
    logger.info("Memory game server ready on %s:%d", settings.host, settings.port)

    yield

    # Shutdown
    await session_manager.cleanup_all()


# Create FastAPI app
app = FastAPI(
    title="Memory Match API",
    description="Matching-pairs memory game",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(api_router, prefix="/api")


# WebSocket endpoint
@app.websocket("/ws/{session_id}")
async def ws_endpoint(websocket: WebSocket, session_id: str):
    """WebSocket endpoint for game sessions."""
    await websocket_endpoint(websocket, session_id, session_manager)


def main():
    """Run the server."""
    import uvicorn

    uvicorn.run(
        "memory_server.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
