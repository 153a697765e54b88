# ================================================================================
# Retry / Backoff Module
# ================================================================================
#
# Generic bounded-retry wrapper with exponential backoff.
#
# Key Features:
#   - Up to `max_retries` attempts in total
#   - Delay before attempt N+1 is retry_delay_ms * 2 ** (N - 1)
#   - The last failure is re-raised on exhaustion
#   - Pluggable async sleep (Playwright's page.wait_for_timeout in practice)
#
# Usage:
#   await retry_async(lambda: locator.click(), config, page.wait_for_timeout)
#
# ================================================================================

import asyncio
from typing import Awaitable, Callable, List, Optional, TypeVar

from loguru import logger

from .healing_config import SelfHealingConfig


T = TypeVar("T")

AsyncSleep = Callable[[float], Awaitable[None]]


def backoff_delays(config: SelfHealingConfig) -> List[int]:
    """
    Inter-attempt delays for a fully failing operation.

    Args:
        config: Retry configuration

    Returns:
        `max_retries - 1` delays in milliseconds, non-decreasing
    """
    return [
        config.retry_delay_ms * 2 ** (attempt - 1)
        for attempt in range(1, config.max_retries)
    ]


async def asyncio_sleep_ms(delay_ms: float) -> None:
    """Default sleep when no page is available."""
    await asyncio.sleep(delay_ms / 1000)


async def retry_async(
    operation: Callable[[], Awaitable[T]],
    config: SelfHealingConfig,
    sleep: Optional[AsyncSleep] = None,
    description: str = "",
) -> T:
    """
    Run `operation` with bounded retries and exponential backoff.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per attempt
        config: Provides max_retries and retry_delay_ms
        sleep: Awaitable sleep taking milliseconds
        description: Label used in log messages

    Returns:
        The result of the first successful attempt

    Raises:
        Exception: The last failure once every attempt is exhausted
    """
    sleep = sleep or asyncio_sleep_ms
    label = description or getattr(operation, "__name__", "operation")
    last_exception: Optional[Exception] = None

    for attempt in range(1, config.max_retries + 1):
        try:
            return await operation()
        except Exception as e:
            last_exception = e
            if attempt == config.max_retries:
                break

            delay = config.retry_delay_ms * 2 ** (attempt - 1)
            if config.enable_logging:
                logger.warning(
                    f"Attempt {attempt}/{config.max_retries} failed for "
                    f"{label}: {str(e)[:120]}. Retrying in {delay}ms..."
                )
            await sleep(delay)

    if config.enable_logging:
        logger.debug(
            f"All {config.max_retries} attempts failed for {label}: "
            f"{str(last_exception)[:200]}"
        )
    raise last_exception


__all__ = [
    "AsyncSleep",
    "backoff_delays",
    "asyncio_sleep_ms",
    "retry_async",
]
