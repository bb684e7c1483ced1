"""
School Management API
=====================
Entry point. Run with: uvicorn main:app   (or: python main.py)
"""

import logging

import uvicorn

from school_locator.api.app import create_app
from school_locator.config import settings

app = create_app(settings)

if __name__ == "__main__":
    logging.getLogger(__name__).info(
        "Server listening on http://%s:%d", settings.host, settings.port
    )
    uvicorn.run("main:app", host=settings.host, port=settings.port)
