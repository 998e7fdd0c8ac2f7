from dotenv import load_dotenv
import os

load_dotenv()

class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./event_ticketing.db")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"
    CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

settings = Settings()
