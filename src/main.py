import logging
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.starlette import StarletteIntegration
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config.logging import setup_logging
from src.config.settings import settings
from src.guest_list.dtos import GuestListError
from src.guest_list.repository.store import GuestListStore
from src.guest_list.routers import router as guest_list_router
from src.guest_list.schemas import ErrorMessage, ErrorResponse
from src.routers.healthz.router import router as healthz_router

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.guest_list_store = GuestListStore(seed_fixture=settings.seed_fixture)
    logger.info(f"Guest list server started on http://localhost:{settings.port}")
    yield


if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=settings.SENTRY_TRACES_SAMPLE_RATE,
        profiles_sample_rate=settings.SENTRY_PROFILES_SAMPLE_RATE,
        integrations=[
            StarletteIntegration(transaction_style="endpoint"),
            FastApiIntegration(transaction_style="endpoint"),
        ],
        send_default_pii=False,
    )

app = FastAPI(
    title="Guest List API",
    description="API for managing events and their guest lists",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept"],
)


def error_response(
    status_code: int, messages: list[str], headers: dict[str, str] | None = None
) -> JSONResponse:
    body = ErrorResponse(errors=[ErrorMessage(message=message) for message in messages])
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


@app.exception_handler(GuestListError)
async def guest_list_error_handler(request: Request, exc: GuestListError) -> JSONResponse:
    logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return error_response(exc.status_code, [exc.message])


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, [str(exc.detail)], headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON and non-object bodies end up here
    messages = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    ]
    logger.warning(f"{request.method} {request.url.path} rejected: {'; '.join(messages)}")
    return error_response(400, messages)


# Include routers
app.include_router(healthz_router, prefix="/healthz", tags=["Healthz"])
app.include_router(guest_list_router, tags=["Guest List"])


@app.get("/", tags=["Root"])
async def root():
    return {"message": "Welcome to the Guest List API"}
