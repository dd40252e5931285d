import logging
import sys

import uvicorn

from api_main import create_app
from habitgrid.config import settings
from habitgrid.errors import StorageUnavailable
from habitgrid.logging_setup import setup_logger
from habitgrid.store import HabitStore

logger = logging.getLogger("habitgrid")


def main() -> int:
    setup_logger(settings.LOG_LEVEL, settings.LOG_FILE or None)
    logger.info("Starting HabitGrid, data dir %s", settings.DATA_DIR)

    try:
        store = HabitStore.open(settings.DATABASE_URL, echo=settings.SQL_ECHO, strict=settings.STRICT_NOT_FOUND)
    except StorageUnavailable as exc:
        logger.error("Cannot start: %s", exc)
        print(f"HabitGrid could not open its database: {exc}", file=sys.stderr)
        return 1

    try:
        uvicorn.run(create_app(store), host=settings.API_HOST, port=settings.API_PORT, log_config=None)
    finally:
        store.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
