from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
from event_ticketing.routes import events, tickets
from event_ticketing.models import Base
from event_ticketing.database import engine
from event_ticketing.config import settings
from event_ticketing.exception_handlers import register_exception_handlers
import logging
import sys

LOG_LEVEL = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s (%(filename)s:%(lineno)d)"
stream_handler = logging.StreamHandler(sys.stdout)
stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
logging.basicConfig(level=LOG_LEVEL, handlers=[stream_handler], force=True)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready.")
    yield
    await engine.dispose()


app = FastAPI(title="Event Ticketing API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)

app.include_router(events.router, prefix="/api")
app.include_router(tickets.router, prefix="/api")


if __name__ == "__main__":
    uvicorn.run("event_ticketing.main:app", reload=True)
