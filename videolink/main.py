"""
videolink — FastAPI Entry Point

Initializes the FastAPI app for the video deep-link landing pages
and registers all route handlers.
"""

import logging

from fastapi import FastAPI

from videolink.api.deeplinks import router as deeplinks_router
from videolink.api.videos import router as videos_router
from videolink.core.config import LOG_LEVEL

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(
    title="videolink",
    description="Deep-link landing pages for marketplace product videos",
    version="0.1.0",
)

# --- Register routers ---
app.include_router(deeplinks_router)
app.include_router(videos_router)


@app.get("/health")
async def health_check():
    """Health check endpoint. Returns service status."""
    return {"status": "ok"}
