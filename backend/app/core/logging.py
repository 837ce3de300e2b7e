import logging

from app.core.config import settings


def configure_logging_if_needed(level: str | None = None) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(
            level=level or settings.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
