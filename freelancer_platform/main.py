from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from freelancer_platform.core.config import settings
from freelancer_platform.core.logging import configure_logging
from freelancer_platform.db.base import Base
from freelancer_platform.db.session import engine

# Import all models so SQLAlchemy can discover them for table creation
from freelancer_platform.models import User, Freelancer, Report, Setting  # noqa: F401

# Import API router
from freelancer_platform.api.api import api_router

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create database tables on startup."""
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.APP_NAME} ready")
    yield


app = FastAPI(
    title=settings.APP_NAME,
    description="Freelancer marketplace API: profiles, reports, settings and user roles",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS Middleware - allowlist from env (comma-separated)
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in settings.BACKEND_CORS_ORIGINS.split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Server error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint."""
    return {"message": f"Welcome to {settings.APP_NAME} API"}


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


# Include API router with /api prefix
app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("freelancer_platform.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
