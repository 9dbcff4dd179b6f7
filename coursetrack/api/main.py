"""
FastAPI app assembly: logging, lifespan, middleware, error mapping and
router wiring.
"""
import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from coursetrack.db.database import init_db, close_db
from coursetrack.errors import CourseTrackError, StorageError
from coursetrack.api.courses import router as courses_router
from coursetrack.api.assignments import router as assignments_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    try:
        yield
    finally:
        close_db()
        logger.info("app_shutdown")


app = FastAPI(
    title="Courses API",
    description="Courses and their assignments, with cascading course deletion.",
    version="1.0.0",
    lifespan=lifespan,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


origins = _cors_origins()

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    # Credentials cannot be combined with a wildcard origin
    allow_credentials="*" not in origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(
        "storage_error: %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
        exc_info=exc.__cause__ or exc,
    )
    return JSONResponse({"detail": "Internal Server Error"}, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@app.exception_handler(CourseTrackError)
async def domain_error_handler(request: Request, exc: CourseTrackError):
    return JSONResponse({"detail": exc.message}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        {"detail": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
        status_code=status.HTTP_400_BAD_REQUEST,
    )


app.include_router(courses_router)
app.include_router(assignments_router)


@app.get("/", response_class=PlainTextResponse)
def root():
    return "Courses API is running"


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "coursetrack"}
