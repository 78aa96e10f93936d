"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sp_admin.api.router import router as admin_router
from src.sp_common.errors import AppError
from src.sp_common.response import error_response
from src.sp_gateway.middleware.request_log import RequestLogMiddleware
from src.sp_ledger.api.router import router as ledger_router
from src.sp_staking.api.router import router as pool_router
from src.sp_staking.application.service import get_staking_service

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: build the pool so config errors surface before serving."""
    service = get_staking_service()
    logger.info("%s ready, pool account %s", settings.APP_NAME, service.pool.account_id)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc.code, exc.message, request)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


app.include_router(pool_router, prefix="/api/v1")
app.include_router(ledger_router, prefix="/api/v1")
app.include_router(admin_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
