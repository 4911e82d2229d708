"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from mybudget.config.settings import get_settings
from mybudget.config.logging_config import setup_logging
from mybudget.repositories.sqlalchemy.database import init_db
from mybudget.api.routers import accounts_router, transactions_router
from mybudget.core.exceptions import AppError, NotFoundError, ValidationError


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging()
    init_db()
    yield
    # Shutdown (nothing to clean up)


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    description="Personal budget tracking: accounts and their transactions",
    version=settings.app_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Authorization"],
)

# Include routers
app.include_router(accounts_router)
app.include_router(transactions_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Global handler for application errors."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.code, "message": exc.message},
    )


@app.exception_handler(NotFoundError)
@app.exception_handler(ValidationError)
async def message_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    """Missing transactions and rule violations answer with the bare message."""
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}
