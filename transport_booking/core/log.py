import asyncio
import logging

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def log_unhandled_task_errors(loop: asyncio.AbstractEventLoop, context: dict) -> None:
    """Loop exception handler: log and keep serving."""
    exc = context.get("exception")
    logger.error("Unhandled error in background task: %s", context.get("message"), exc_info=exc)
