"""
Portfolio Contact API
FastAPI application behind the portfolio site's contact form.
"""

import logging

from fastapi import FastAPI

from app.config import LOG_LEVEL
from app.routers import contact

# Configure logging to output to console
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Portfolio Contact API",
    description="Relays portfolio contact form submissions to a transactional email provider",
    version="0.1.0",
)

# CORS for /api/contact is handled by the router itself
app.include_router(contact.router, tags=["contact"])


@app.get("/")
async def root():
    return {"message": "Portfolio Contact API", "version": "0.1.0"}


@app.get("/health")
async def health():
    return {"status": "ok"}
