"""
Component Update Helper — Logger for network steps (GitHub API calls, artifact probes).
"""

import logging
import time
from contextlib import contextmanager
from typing import Generator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)-7s | %(message)s",
    datefmt="%H:%M:%S",
)

logger = logging.getLogger("component_updates")


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


@contextmanager
def step_timer(step_name: str) -> Generator[None, None, None]:
    """Log when a step starts, and whether it succeeded or failed and after how long."""
    logger.info("▶ %s", step_name)
    start = time.perf_counter()
    try:
        yield
    except Exception as exc:
        logger.error(
            "✗ %s failed after %.0f ms: %s: %s",
            step_name, _elapsed_ms(start), type(exc).__name__, exc,
        )
        raise
    logger.info("✔ %s (%.0f ms)", step_name, _elapsed_ms(start))
