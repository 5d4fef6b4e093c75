"""
Shared entry point for the seed scripts.

Each script supplies an async ``work(session, settings)`` callable; the
runner configures logging, opens the store, runs the work in a single
transaction and maps the outcome to a process exit code.
"""
import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from core.config import Settings, get_settings
from db.session import open_store, transaction

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

Work = Callable[[AsyncSession, Settings], Awaitable[Any]]


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for a script run."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


async def run_work(name: str, work: Work, settings: Settings) -> int:
    """
    Run ``work`` against a fresh store and return the exit code.

    The work is committed only if it completes; any exception is logged,
    rolled back and reported as exit code 1. The engine is disposed either way.
    """
    logger.info("Starting %s", name)
    try:
        async with open_store(settings) as store, transaction(store) as session:
            await work(session, settings)
    except Exception:
        logger.exception("%s failed", name)
        return 1
    logger.info("%s complete", name)
    return 0


def run_script(name: str, work: Work, settings: Settings | None = None) -> int:
    """
    Synchronous wrapper used by each script's ``main()``.

    Args:
        name: Script name for log lines.
        work: Async callable receiving the session and settings.
        settings: Explicit settings; loaded from the environment when None.

    Returns:
        0 on success, 1 on any failure (including invalid configuration).
    """
    configure_logging()
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            logger.exception("Invalid configuration for %s", name)
            return 1
    configure_logging(settings.log_level)
    return asyncio.run(run_work(name, work, settings))
