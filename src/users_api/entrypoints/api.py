from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.adapters.repository import create_repository
from users_api.entrypoints.routers import users
from users_api.entrypoints.schemas.user import new_json_response
from users_api.services.config import Settings

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    return Response(
        content=new_json_response(str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
        media_type="application/json",
    )


async def internal_exception_handler(request: Request, exc: Exception) -> Response:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc!r}", exc_info=exc)
    return Response(
        content=new_json_response("internal error"),
        status_code=500,
        media_type="application/json",
    )


class API(FastAPI):
    def __init__(self, settings: Settings) -> None:
        super().__init__(title="Users API")
        self.state.settings = settings
        self.state.users = create_repository(settings.USERS_API_DB_TYPE)

        self.add_exception_handler(StarletteHTTPException, http_exception_handler)
        self.add_exception_handler(Exception, internal_exception_handler)

        @self.get("/", response_class=PlainTextResponse)
        async def index() -> str:
            return "Hello World!"

        @self.get("/health")
        async def health() -> dict[str, str]:
            return {"status": "ok"}

        self.include_router(users.router, prefix=settings.USERS_API_URL_PREFIX, tags=["users"])


def create_app(settings: Optional[Settings] = None) -> API:
    return API(settings or Settings())
