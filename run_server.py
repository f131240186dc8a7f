#!/usr/bin/env python3
"""
toolchat server launcher
Runs the FastAPI chat endpoint under uvicorn
"""
import logging

import uvicorn

from toolchat.config import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main():
    logger.info(f"HTTP server will run on http://{settings.http_host}:{settings.http_port}")
    uvicorn.run(
        "toolchat.main:app",
        host=settings.http_host,
        port=settings.http_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
