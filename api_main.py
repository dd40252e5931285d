from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from habitgrid import __version__
from habitgrid.api import bridge_body_error, router
from habitgrid.api.deps import get_store
from habitgrid.bridge import Bridge
from habitgrid.config import settings
from habitgrid.store import HabitStore


def create_app(store: Optional[HabitStore] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owns_store = app.state.store is None
        if owns_store:
            # StorageUnavailable propagates and aborts startup
            opened = HabitStore.open(settings.DATABASE_URL, echo=settings.SQL_ECHO, strict=settings.STRICT_NOT_FOUND)
            app.state.store = opened
            app.state.bridge = Bridge(opened)
        try:
            yield
        finally:
            if owns_store:
                app.state.store.close()
                app.state.store = None
                app.state.bridge = None

    app = FastAPI(title="HabitGrid API", version=__version__, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if settings.CORS_ORIGINS else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(router)
    app.add_exception_handler(RequestValidationError, bridge_body_error)

    app.state.store = store
    app.state.bridge = Bridge(store) if store is not None else None

    @app.get("/health/live")
    def health_live() -> dict[str, str]:
        return {"status": "alive"}

    @app.get("/health/ready")
    def health_ready(store: HabitStore = Depends(get_store)) -> dict[str, str]:
        store.ping()
        return {"status": "ready"}

    return app


app = create_app()
