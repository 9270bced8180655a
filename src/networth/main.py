"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from networth.config.settings import get_settings
from networth.config.logging_config import setup_logging
from networth.repositories.sqlalchemy.database import init_db
from networth.api.routers import (
    accounts_router,
    transactions_router,
    analysis_router,
    budgets_router,
    schedules_router,
)
from networth.core.exceptions import AppError

_STATUS_BY_CODE = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STORE_UNAVAILABLE": status.HTTP_503_SERVICE_UNAVAILABLE,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging()
    init_db()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal finance ledger with derived balances, net worth and holdings",
    version=settings.app_version,
    lifespan=lifespan,
)

app.include_router(accounts_router)
app.include_router(transactions_router)
app.include_router(analysis_router)
app.include_router(budgets_router)
app.include_router(schedules_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=_STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST),
        content={"error": exc.code, "message": exc.message},
    )


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
def root() -> dict[str, str]:
    """Root endpoint with API info."""
    return {
        "app": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
