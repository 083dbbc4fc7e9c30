from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    LOG_LEVEL: str = "INFO"

    FRONTEND_BASE_URL: str = "http://localhost:3000"

    # Redis settings
    REDIS_URL: str = "redis://localhost:6379/0"
    REFRESH_TOKEN_EXPIRE_DAYS: int = 7
    MAX_CONCURRENT_REFRESHES: int = 3

    # Cookie settings
    COOKIE_SECURE: bool = True

    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""

    # Users signing in with this email get the admin role
    OWNER_EMAIL: Optional[str] = None

    PROJECT_NAME: str = "Trip Planner Pro API"
    PROJECT_VERSION: str = "1.0.0"
    PROJECT_DESCRIPTION: str = "Plan trips, bookings, documents and budgets together"

    # File storage: "local" writes under STORAGE_LOCAL_DIR, "remote" talks to STORAGE_API_URL
    STORAGE_BACKEND: str = "local"
    STORAGE_LOCAL_DIR: str = "uploads"
    STORAGE_API_URL: str = ""
    STORAGE_API_KEY: str = ""
    MAX_UPLOAD_SIZE_BYTES: int = 10 * 1024 * 1024

    # Budget conversion
    EXCHANGE_RATE_API_URL: str = "https://open.er-api.com/v6/latest"
    BUDGET_BASE_CURRENCY: str = "ILS"
    EXCHANGE_RATE_CACHE_SECONDS: int = 6 * 3600

    # Demo accounts
    DEMO_TRIP_ID: int = 30001
    DEMO_DURATION_DAYS: int = 7
    DEMO_MAX_TRIPS: int = 2

    class Config:
        env_file = ".env"


settings = Settings()
