"""
MODULE OVERVIEW:
The FastAPI application factory.

WHAT IS HAPPENING HERE:
`create_app()` takes the already validated `Config` and hangs it on
`app.state`, so handlers read it from the request instead of a global.
The lifespan only reports the start and the end of serving; uvicorn owns the
signal handling and drains open connections before the shutdown half runs.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from pulse.core.config import Config
from pulse.server.middleware import RecoveryMiddleware, RequestLoggingMiddleware

CORS_ALLOW_HEADERS = ["Origin", "Content-Type", "Accept", "Authorization"]
CORS_ALLOW_METHODS = ["GET", "POST", "HEAD", "PUT", "DELETE", "PATCH"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    config: Config = app.state.config
    logger.info(f"pulse starting env={config.server.env} port={config.server.port}")

    yield

    logger.info("Gracefully shutting down...")


def create_app(config: Config) -> FastAPI:
    app = FastAPI(title="pulse", version="0.1.0", lifespan=lifespan)
    app.state.config = config

    # Starlette wraps in reverse order: the last one added runs first.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RecoveryMiddleware)

    return app
