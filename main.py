"""
School Locator Backend
======================
Entry point. Run with: uvicorn main:app --reload
"""

import logging

import uvicorn

from school_locator.api.app import create_app
from school_locator.config import settings

app = create_app()

if __name__ == "__main__":
    logging.getLogger(__name__).info(
        "Server running on port %d", settings.port
    )
    uvicorn.run("main:app", host=settings.host, port=settings.port)
