import logging
import sys
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

from class_tracker.core.config import settings
from class_tracker.core.database import init_engine, create_tables, dispose_engine
from class_tracker.core.exceptions import ConfigurationError, StoreError, ValidationError
from class_tracker.api.router import api_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("Starting up Class Tracker API...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")

    if not settings.DATABASE_URL:
        logger.critical("FATAL ERROR: The DATABASE_URL environment variable is not defined.")
        raise ConfigurationError("The DATABASE_URL environment variable is not defined.")

    init_engine(settings.DATABASE_URL)
    await create_tables()
    logger.info("Database tables created successfully")

    logger.info("Class Tracker API startup complete")

    yield

    # Shutdown
    logger.info("Shutting down Class Tracker API...")
    await dispose_engine()


# Create FastAPI application
app = FastAPI(
    title="Class Tracker API",
    description="Weekly class timetable, attendance and attendance summary",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
)


# Configure CORS (always enabled)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(exc)}
    )


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": exc.message, "error": exc.error}
    )


# Include API routes
app.include_router(api_router, prefix="/api")


# Health check endpoint
@app.get("/")
async def root():
    return {
        "message": "Class Tracker API",
        "version": "1.0.0",
        "status": "running",
        "environment": settings.ENVIRONMENT
    }


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "message": "Class Tracker API is running successfully"
    }


def run():
    """Console entry point: refuse to start without a database address."""
    import uvicorn

    if not settings.DATABASE_URL:
        logger.critical("FATAL ERROR: The DATABASE_URL environment variable is not defined.")
        sys.exit(1)

    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)


if __name__ == "__main__":
    run()
