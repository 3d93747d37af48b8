import logging

import logging_loki

from concert_manager.utils.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(application: str = "concert_manager") -> logging.Logger:
    """Configure the root logger; ships records to Loki when LOKI_URL is set."""
    logging.basicConfig(level=settings.LOG_LEVEL, format=LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(settings.LOG_LEVEL)

    if settings.LOKI_URL and not any(isinstance(h, logging_loki.LokiHandler) for h in root_logger.handlers):
        loki_handler = logging_loki.LokiHandler(
            url=settings.LOKI_URL,
            tags={"application": application, "environment": settings.APP_ENV, "job_name": application},
            version="1",
        )
        root_logger.addHandler(loki_handler)

    return root_logger
