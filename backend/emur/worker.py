"""
Forecast Worker Entry Point

Runs the hourly forecast poller as its own process, sharing the database
with the API.

Usage:
    python -m emur.worker
    # or, once installed
    emur-worker
"""

import logging
import signal
import threading

from emur.core.config import get_settings
from emur.core.security import configure_field_encryption
from emur.db.base import Base
from emur.db.session import SessionLocal, engine
from emur.integrations.forecast import ForecastClient
from emur.services.error_logging import configure_error_logging, configure_logging
from emur.services.forecast_service import ForecastWorker

logger = logging.getLogger(__name__)


def main():
    settings = get_settings()
    configure_logging(settings)
    configure_field_encryption(settings.encryption_secret)

    Base.metadata.create_all(bind=engine)
    configure_error_logging(SessionLocal)

    if not settings.FORECAST_KEY:
        logger.warning("[Forecast Worker] FORECAST_KEY is empty, provider calls will be rejected")

    stop_event = threading.Event()

    def handle_signal(signum, frame):
        logger.info(f"[Forecast Worker] Received signal {signum}, stopping")
        stop_event.set()

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    worker = ForecastWorker(SessionLocal, ForecastClient(settings), settings)
    worker.run(stop_event)


if __name__ == "__main__":
    main()
