import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers tables on SQLModel.metadata
from src.adapter.services.quote_broadcaster import InMemoryQuoteBroadcaster
from src.adapter.services.tenant_lock import AsyncioTenantLock
from src.api.error import register_error_handlers
from src.api.routes import line_item_dates, line_items, quotes, session, stream

logger = logging.getLogger(__name__)


def create_app(config) -> FastAPI:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if config.AUTO_CREATE_TABLES:
            from src.depends import engine

            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables created")
        yield

    app = FastAPI(title="Quote Builder API", lifespan=lifespan)

    # One broadcaster and one set of tenant locks per process
    app.state.broadcaster = InMemoryQuoteBroadcaster(queue_size=config.BROADCAST_QUEUE_SIZE)
    app.state.tenant_lock = AsyncioTenantLock()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    register_error_handlers(app, config.DEFAULT_ROUTE)

    app.include_router(stream.router)
    app.include_router(session.router)
    app.include_router(quotes.router)
    app.include_router(line_item_dates.router)
    app.include_router(line_items.router)

    return app
