from __future__ import annotations

import structlog
from fastapi import FastAPI

from user_api.api.system import router as system_router
from user_api.api.users import router as users_router
from user_api.config import Settings, get_settings
from user_api.db.user_store import UserStore
from user_api.errors import register_exception_handlers
from user_api.observability.logging import configure_logging
from user_api.observability.middleware import RequestContextMiddleware


def create_app(settings: Settings | None = None, store: UserStore | None = None) -> FastAPI:
    """Build the application around one explicitly owned user store."""
    settings = settings or get_settings()
    configure_logging(settings.log_level, json_output=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="CRUD operations over an in-memory collection of users",
        docs_url="/api/docs",
        redoc_url=None,
        openapi_url="/api/openapi.json",
    )
    app.state.user_store = store if store is not None else UserStore()

    app.add_middleware(RequestContextMiddleware, header_name=settings.request_id_header)
    register_exception_handlers(app)

    app.include_router(system_router)
    structlog.get_logger("startup").info("routes.register", users_path=settings.users_path)
    app.include_router(users_router, prefix=settings.users_path)
    return app


app = create_app()
