"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from wordblog.config import settings
from wordblog.database import Base, engine
import wordblog.models  # noqa: F401 - registers model metadata
from wordblog.errors import BlogError
from wordblog.routers import auth, blogs, generate
from wordblog.utils.schema_sync import sync_schema

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Word Blog",
    description="Turns a single word into a published blog post",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BlogError)
async def handle_blog_error(request: Request, exc: BlogError):
    if exc.status_code >= 500:
        logger.warning("[api] %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(exc.payload(), status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def handle_request_validation(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    return JSONResponse({"message": message}, status_code=400)


@app.exception_handler(Exception)
async def handle_unexpected(request: Request, exc: Exception):
    logger.exception("[api] unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse({"message": "Internal server error"}, status_code=500)


app.include_router(generate.router)
app.include_router(blogs.router)
app.include_router(auth.router)


@app.on_event("startup")
def ensure_schema():
    sync_schema(engine, Base.metadata)


@app.get("/api/health")
def health_check():
    return {"status": "ok", "service": "Word Blog"}
