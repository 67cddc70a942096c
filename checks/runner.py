import logging
from collections import Counter
from collections.abc import Awaitable, Callable

import httpx
from clients.career_client import ApiContentError, ApiTransportError, build_get, career_client
from positions.outcome import Outcome, ValidationResult
from positions.validator import (
    evaluate_response,
    validate_executive_user,
    validate_job_description,
    validate_work_location,
)
from utils.config import ApiSettings
from utils.constants import HTTP_STATUS_OK, INVALID_POSITION
from utils.retry import RetryPolicy, describe_status, execute_with_retry

logger = logging.getLogger(__name__)

Check = Callable[[httpx.AsyncClient, ApiSettings], Awaitable[ValidationResult]]


def settings_policy(settings: ApiSettings, max_attempts: int | None = None) -> RetryPolicy:
    return RetryPolicy(
        max_attempts=max_attempts or settings.max_attempts,
        base_delay_ms=settings.base_delay_ms,
    )


async def fetch_position(client: httpx.AsyncClient, settings: ApiSettings) -> httpx.Response:
    request = build_get(settings.position, user_agent=settings.user_agent)
    logger.info("Testing endpoint: %s", settings.position_url)
    return await execute_with_retry(client, request, policy=settings_policy(settings))


async def check_connectivity(client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    response = await fetch_position(client, settings)
    if response.status_code != HTTP_STATUS_OK:
        return ValidationResult.inconclusive(f"Endpoint not accessible: {describe_status(response.status_code)}")
    if not response.text:
        return ValidationResult.failed(["Response body should contain data"])
    return ValidationResult.passed(reason="Endpoint connectivity check passed")


async def check_job_description(client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    return evaluate_response(await fetch_position(client, settings), validate_job_description)


async def check_work_location(client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    return evaluate_response(await fetch_position(client, settings), validate_work_location)


async def check_executive_user(client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    return evaluate_response(await fetch_position(client, settings), validate_executive_user)


async def check_invalid_segment(client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    request = build_get(INVALID_POSITION, user_agent=settings.user_agent)
    response = await execute_with_retry(client, request, policy=settings_policy(settings, max_attempts=1))
    status = describe_status(response.status_code)
    logger.info("Invalid segment returned: %s", status)
    if response.status_code == HTTP_STATUS_OK:
        return ValidationResult.failed(["Invalid URL segment should not return 200 OK"])
    return ValidationResult.passed(reason=f"Invalid segment rejected with {status}")


POSITION_CHECKS: dict[str, Check] = {
    "connectivity": check_connectivity,
    "job_description": check_job_description,
    "work_location": check_work_location,
    "executive_user": check_executive_user,
    "invalid_segment": check_invalid_segment,
}


async def run_check(name: str, check: Check, client: httpx.AsyncClient, settings: ApiSettings) -> ValidationResult:
    try:
        result = await check(client, settings)
    except ApiTransportError as e:
        result = ValidationResult.inconclusive(f"Endpoint unreachable: {e}")
    except ApiContentError as e:
        result = ValidationResult.inconclusive(f"Malformed content: {e}")
    logger.info("Check %s: %s %s", name, result.outcome.value, result.reason)
    return result


async def run_position_checks(
    settings: ApiSettings,
    checks: dict[str, Check] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> dict:
    """Run every live check against one shared client and summarise the outcomes."""
    checks = checks or POSITION_CHECKS
    results: dict[str, ValidationResult] = {}

    async with career_client(settings, transport) as client:
        for name, check in checks.items():
            results[name] = await run_check(name, check, client, settings)

    counts = Counter(result.outcome for result in results.values())
    return {
        "results": results,
        "passed": counts[Outcome.PASS],
        "failed": counts[Outcome.FAIL],
        "inconclusive": counts[Outcome.INCONCLUSIVE],
    }
