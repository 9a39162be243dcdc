"""FastAPI application main module."""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.api.limiter import limiter
from app.api.v1.events import router as events_router
from app.api.v1.moderation import router as moderation_router
from app.api.v1.reference import router as reference_router
from app.api.v1.users import router as users_router
from app.core.config import get_settings
from app.core.word_lists import get_word_matcher
from app.db.session import AsyncSessionLocal, init_db
from app.services.reference_service import seed_statuses
from app.utils.logging import setup_logging

settings = get_settings()
logger = setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up %s...", settings.PROJECT_NAME)
    # Raises WordListError on unreadable word lists
    matcher = get_word_matcher()
    logger.info(
        "Content filter ready: %d forbidden, %d unnecessary words",
        len(matcher.forbidden_words),
        len(matcher.unnecessary_words),
    )
    await init_db()
    async with AsyncSessionLocal() as session:
        await seed_statuses(session)
    yield
    logger.info("Shutting down %s...", settings.PROJECT_NAME)


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Meetup events with word-based content moderation",
    version="1.0.0",
    lifespan=lifespan,
)

# Add rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(events_router)
app.include_router(moderation_router)
app.include_router(users_router)
app.include_router(reference_router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    logger.info("Incoming request %s %s", request.method, request.url)
    response = await call_next(request)
    logger.info("Response status: %s", response.status_code)
    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled errors."""
    logger.error("Unhandled error: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


@app.get("/")
async def root():
    return {"message": f"{settings.PROJECT_NAME} is running", "version": "1.0.0"}


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
