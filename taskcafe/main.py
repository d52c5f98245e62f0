import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from . import storage
from .config import CORS_ORIGINS, LOG_LEVEL, PUBLIC_DIR
from .errors import StorageError, TaskCafeError, ValidationError
from .logging_setup import setup_logging
from .routers import tasks

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="TaskCafe API",
    description="Single-user todo list backed by a JSON file",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TaskCafeError)
async def taskcafe_error_handler(request: Request, exc: TaskCafeError):
    if isinstance(exc, StorageError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = ValidationError.default_message
    if errors:
        location = ".".join(str(part) for part in errors[0].get("loc", ()) if part != "body")
        message = f"Invalid value for {location}: {errors[0].get('msg')}" if location else errors[0].get("msg")
    logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
    return JSONResponse(status_code=ValidationError.status_code, content={"error": message})


# Include routers
app.include_router(tasks.router, prefix="/api", tags=["todos"])


# Prepare storage on startup
@app.on_event("startup")
def on_startup():
    setup_logging(LOG_LEVEL)
    storage.ensure_storage_dir()
    logger.info("TaskCafe server ready, data stored in %s", getattr(storage.repository, "path", "memory"))


@app.get("/health")
def health_check():
    return {"status": "healthy"}


# Static client; mounted last so the API routes above take precedence.
if PUBLIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=PUBLIC_DIR, html=True), name="public")
else:
    logger.warning("Static directory %s not found; serving API only", PUBLIC_DIR)
