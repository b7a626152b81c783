import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from budget_tracker import __version__
from budget_tracker.config import get_settings
from budget_tracker.exceptions import BudgetTrackerError, StorageError

settings = get_settings()
logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Route every ``budget_tracker.*`` logger to stderr at ``LOG_LEVEL``."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    _configure_logging()

    # Startup: make sure the schema exists (Alembic manages it in deployments)
    from budget_tracker.database import init_db

    init_db()
    logger.info("%s ready, API mounted at '%s'", settings.APP_NAME, settings.API_PREFIX)
    yield


app = FastAPI(
    title=settings.APP_NAME,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# Error mapping
# ---------------------------------------------------------------------------


@app.exception_handler(BudgetTrackerError)
async def budget_tracker_error_handler(request: Request, exc: BudgetTrackerError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # Malformed bodies are client errors (400) rather than FastAPI's default 422
    messages = [
        f"{'.'.join(str(part) for part in err.get('loc', ()))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    logger.info("%s %s invalid payload: %s", request.method, request.url.path, messages)
    return JSONResponse(status_code=400, content={"detail": "; ".join(messages)})


@app.get(f"{settings.API_PREFIX}/health")
def health_check():
    return {"status": "ok", "app": settings.APP_NAME}


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------

from budget_tracker.routers import projects  # noqa: E402

app.include_router(projects.router, prefix=settings.API_PREFIX)

from budget_tracker.routers import subbudgets  # noqa: E402

app.include_router(subbudgets.router, prefix=settings.API_PREFIX)

from budget_tracker.routers import positions  # noqa: E402

app.include_router(positions.router, prefix=settings.API_PREFIX)
