import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus

import httpx
import sentry_sdk
from clients.career_client import CareerRequest, send
from utils.constants import BASE_DELAY_MS, HTTP_STATUS_OK, MAX_ATTEMPTS, RETRYABLE_STATUS_CODES

logger = logging.getLogger(__name__)


class RetryOutcome(Enum):
    SUCCESS = "success"
    RETRY = "retry"
    TERMINAL = "terminal"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = MAX_ATTEMPTS
    base_delay_ms: int = BASE_DELAY_MS
    retryable_statuses: frozenset[int] = RETRYABLE_STATUS_CODES

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            error_msg = f"max_attempts must be >= 1, got {self.max_attempts}"
            raise ValueError(error_msg)
        if self.base_delay_ms < 0:
            error_msg = f"base_delay_ms must be >= 0, got {self.base_delay_ms}"
            raise ValueError(error_msg)
        object.__setattr__(self, "retryable_statuses", frozenset(self.retryable_statuses))

    def is_retryable(self, status_code: int) -> bool:
        return status_code in self.retryable_statuses

    def delay_for(self, attempt: int) -> float:
        # Linear: 500ms after attempt 1, 1000ms after attempt 2, ...
        return self.base_delay_ms * attempt / 1000


def classify_attempt(status_code: int, attempt: int, policy: RetryPolicy) -> RetryOutcome:
    if status_code == HTTP_STATUS_OK:
        return RetryOutcome.SUCCESS
    if not policy.is_retryable(status_code):
        return RetryOutcome.TERMINAL
    if attempt < policy.max_attempts:
        return RetryOutcome.RETRY
    return RetryOutcome.EXHAUSTED


def describe_status(status_code: int) -> str:
    try:
        return f"{status_code} {HTTPStatus(status_code).phrase}"
    except ValueError:
        return str(status_code)


async def execute_with_retry(
    client: httpx.AsyncClient,
    request: CareerRequest,
    max_attempts: int = MAX_ATTEMPTS,
    policy: RetryPolicy | None = None,
) -> httpx.Response:
    """Send ``request`` until it returns 200, hits a terminal status, or runs out of attempts.

    Retryable statuses (403, 429, 503 by default) wait ``base_delay_ms * attempt``
    before the next attempt. HTTP error statuses are returned, never raised;
    ``ApiTransportError`` from the transport propagates unchanged.
    """
    if policy is None:
        policy = RetryPolicy(max_attempts=max_attempts)

    attempt = 0
    response = None
    while attempt < policy.max_attempts:
        attempt += 1
        response = await send(client, request)
        status = describe_status(response.status_code)
        logger.info("Attempt %s/%s: %s", attempt, policy.max_attempts, status)

        outcome = classify_attempt(response.status_code, attempt, policy)
        if outcome is RetryOutcome.SUCCESS:
            logger.info("Request succeeded on attempt %s", attempt)
            return response

        if outcome is RetryOutcome.TERMINAL:
            logger.warning("Non-retryable status %s, stopping attempts", status)
            return response

        if outcome is RetryOutcome.EXHAUSTED:
            logger.warning("Retryable status %s on final attempt %s, giving up", status, attempt)
            with sentry_sdk.push_scope() as scope:
                scope.set_tag("component", "execute_with_retry")
                scope.set_extra("resource", request.resource)
                scope.set_extra("attempts", attempt)
                scope.set_extra("status_code", response.status_code)
                sentry_sdk.capture_message(
                    f"Retries exhausted for {request.resource}: {status}",
                    level="warning"
                )
            return response

        delay = policy.delay_for(attempt)
        logger.info("Retrying in %sms...", int(delay * 1000))
        await asyncio.sleep(delay)

    return response
