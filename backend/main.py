from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from api import owners
from config.app_config import LOG_DIR, LOG_LEVEL
from constants import ServerConfig
from init_db import init_database
from utils.logging_utils import configure_logging

configure_logging(LOG_LEVEL, LOG_DIR)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    init_database()
    logger.info("🚀 Pet Clinic API started")
    yield
    logger.info("Pet Clinic API stopped")


app = FastAPI(
    title="Pet Clinic API",
    description="Owner records for the pet clinic",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(owners.router, prefix="/api", tags=["owners"])


@app.get("/health")
def health():
    """Liveness probe"""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Pet Clinic on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
