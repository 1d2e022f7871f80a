"""Simulated remote data access."""

import asyncio
import logging

from drills.domain.errors import FetchDataError

logger = logging.getLogger(__name__)

FETCH_FAILED = "Failed to fetch data"


async def fetch_data(delay: float = 0.0) -> list[int]:
    """Model a network fetch that always fails after `delay` seconds.

    Raises:
        FetchDataError: Always, with `reasons` set to "Failed to fetch data".
    """
    await asyncio.sleep(delay)
    logger.error(FETCH_FAILED)
    raise FetchDataError(reasons=FETCH_FAILED)
