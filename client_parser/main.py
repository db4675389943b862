# client_parser/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from client_parser import __version__
from client_parser.api import router as classify_router
from client_parser.classifier import KNOWN_USER_AGENTS
from client_parser.config import settings
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    logger.info("Starting Client Parser API...")
    logger.info(f"Classification cache limit: {settings.cache_max_entries} entries")

    yield

    logger.info(f"Shutting down, {len(KNOWN_USER_AGENTS)} cached classifications dropped")
    KNOWN_USER_AGENTS.clear()


app = FastAPI(
    title="Client Parser API",
    description="Classifies user agent strings into device, OS, browser and engine facts",
    version=__version__,
    lifespan=lifespan,
)

# Register routes
app.include_router(classify_router)
