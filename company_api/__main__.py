"""
Startup script.

Handles:
    1. Database initialisation (creates tables)
    2. Starts the FastAPI server (uvicorn)

Usage:
    python -m company_api                  # init schema + serve
    python -m company_api --port 9000      # custom port
    python -m company_api --init-db-only   # create tables and exit
"""

import argparse
import asyncio
import logging

import uvicorn

from company_api.config import API_HOST, API_PORT, DATABASE_URL, LOG_LEVEL
from company_api.database import engine, init_db

logger = logging.getLogger(__name__)


async def _prepare_database():
    await init_db()
    # Pooled connections are bound to this event loop; uvicorn starts its own
    await engine.dispose()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="company_api")
    parser.add_argument("--host", default=API_HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=API_PORT, help="Bind port")
    parser.add_argument("--init-db-only", action="store_true", help="Create tables and exit")
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))

    # Host part only; the URL may carry credentials
    logger.info("Initialising database at %s", DATABASE_URL.split("@")[-1])
    asyncio.run(_prepare_database())
    if args.init_db_only:
        return

    uvicorn.run("company_api.app:app", host=args.host, port=args.port)


if __name__ == "__main__":
    main()
