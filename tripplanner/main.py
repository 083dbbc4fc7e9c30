from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from tripplanner.core.config import settings
from tripplanner.core.init_db import init_db
from tripplanner.core.logger import logger
from tripplanner.core.redis_lifecycle import init_redis_client, close_redis
from tripplanner.routes import api_router

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.PROJECT_DESCRIPTION,
    openapi_url="/openapi.json"
)

# Set all CORS enabled origins
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=(
        r"^(http:\/\/localhost(:\d{1,5})?|http:\/\/127\.0\.0\.1(:\d{1,5})?)$"
    ),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# required for Authlib OAuth
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.JWT_SECRET_KEY,
    same_site="lax",
    https_only=settings.COOKIE_SECURE
)


# Include all API routes
app.include_router(api_router)

# Uploaded files are served from disk when no storage API is configured
if settings.STORAGE_BACKEND == "local":
    upload_dir = Path(settings.STORAGE_LOCAL_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount("/files", StaticFiles(directory=str(upload_dir)), name="files")


@app.get("/")
async def root():
    return {"message": "Welcome to Trip Planner Pro API"}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


@app.on_event("startup")
async def startup_event():
    await init_db()
    await init_redis_client()
    logger.info("Trip Planner Pro API started")


@app.on_event("shutdown")
async def shutdown_event():
    await close_redis()
