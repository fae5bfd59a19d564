# users_api/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_api.api.api import api_router
from users_api.core.config import Settings, get_settings
from users_api.core.errors import register_exception_handlers
from users_api.core.logging import configure_logging
from users_api.db.session import create_db_engine
from users_api.services.user_store import UserStore

logger = logging.getLogger(__name__)


def create_application(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    # The store is created here and handed to the routes through app.state
    store = UserStore(create_db_engine(settings.database_url))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.open()
        yield
        store.close()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store

    # ---------- CORS ----------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ---------- ERRORS ----------
    register_exception_handlers(app)

    # ---------- ROUTERS ----------
    app.include_router(api_router)

    return app


app = create_application()


def run() -> None:
    settings = get_settings()
    logger.info("Server running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
