import logging
from core.config import settings


def resolve_log_level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    # unknown names come back as the string "Level <NAME>"
    if not isinstance(level, int):
        return logging.INFO
    return level


def setup_logging(level: str | None = None):
    """Configures the root logger once for the action and the API host."""
    logging.basicConfig(
        level=resolve_log_level(level or settings.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
