"""FastAPI application entry point for the Rainfall Monitor service.

Runs the shared-record API with uvicorn. On startup the record collection is
created with its validator and indexes; this can be skipped by setting the
SKIP_DB_INIT environment variable to "true", "1", or "yes" (e.g. when the
database is provisioned separately).
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from pymongo.errors import PyMongoError
from rainfall_monitor.app import create_app as _create_app
from rainfall_monitor.logger import get_logger, setup_logging
from rainfall_monitor.persistence.database import ScadaDatabase
import argparse
import os
import uvicorn

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise the record collection before serving requests.

    Parameters
    ----------
    app : FastAPI
        The FastAPI application instance.

    Yields
    ------
    None
        Control back to the application after startup.
    """
    if not os.getenv("SKIP_DB_INIT", "").lower() in ["true", "1", "yes"]:
        db = ScadaDatabase()
        try:
            db.initialize()
            log.info(f"Record collection ready: {db.records.full_name}")
        except PyMongoError as exc:
            log.warning(f"Record collection initialisation failed: {exc}")
        finally:
            db.close()
    yield


def create_app() -> FastAPI:
    """Create the service application with database initialisation on startup."""
    return _create_app(lifespan=lifespan)


app = create_app()

if __name__ == "__main__":
    parser = argparse.ArgumentParser(
        description="Rainfall Monitor API service")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8008)
    parser.add_argument("--skip-db-init", action="store_true",
                        help="Do not create the record collection on startup")
    parser.add_argument("--log-level", default=None,
                        help="Override LOG_LEVEL for this run")

    args = parser.parse_args()

    if args.skip_db_init:
        os.environ["SKIP_DB_INIT"] = "true"
    if args.log_level:
        setup_logging(args.log_level)

    uvicorn.run(app, host=args.host, port=args.port)
