# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-13
# Description: retry.py
# -----------------------------------------------------------------------------
import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

import openai

from utility.errors import GatewayFailure
from utility.gateway_result import GatewayResult

T = TypeVar("T")

# Client errors that fail the same way on every attempt
PERMANENT_ERRORS = (
    openai.AuthenticationError,
    openai.BadRequestError,
    openai.PermissionDeniedError,
)


async def call_gateway(
        gateway: str,
        operation: str,
        fn: Callable[[], Awaitable[T]],
        *,
        timeout: float,
        max_retries: int,
        logger: logging.Logger,
        initial_delay: float = 0.8,
        backoff: float = 1.7,
) -> GatewayResult[T]:
    """
    Await ``fn()`` with a per-attempt timeout and exponential backoff.

    Timeouts and transient errors are retried until ``max_retries`` is
    reached; the last one is returned as a GatewayFailure. Auth, permission
    and bad-request errors are returned on the first attempt.
    Cancellation is never swallowed.
    """
    delay = initial_delay
    last_exc: BaseException | None = None

    for attempt in range(1, max_retries + 1):
        try:
            value = await asyncio.wait_for(fn(), timeout=timeout)
            return GatewayResult.success(value)
        except PERMANENT_ERRORS as e:
            failure = GatewayFailure.from_exception(gateway, operation, e, retryable=False)
            logger.error("%s.%s failed permanently: %s", gateway, operation, failure.message)
            return GatewayResult.failure(failure)
        except asyncio.TimeoutError as e:
            last_exc = e
            logger.warning(
                "%s.%s timed out after %.1fs (attempt %d/%d)",
                gateway, operation, timeout, attempt, max_retries,
            )
        except Exception as e:
            last_exc = e
            logger.warning(
                "%s.%s failed (attempt %d/%d): %s",
                gateway, operation, attempt, max_retries, e,
            )

        if attempt < max_retries:
            await asyncio.sleep(delay)
            delay *= backoff

    if isinstance(last_exc, asyncio.TimeoutError):
        failure = GatewayFailure(
            gateway, operation, f"timed out after {timeout:.1f}s", cause=last_exc, retryable=True,
        )
    else:
        failure = GatewayFailure.from_exception(gateway, operation, last_exc, retryable=False)

    logger.error("%s.%s gave up after %d attempts: %s", gateway, operation, max_retries, failure.message)
    return GatewayResult.failure(failure)
