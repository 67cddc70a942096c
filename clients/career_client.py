import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from types import MappingProxyType

import httpx
import sentry_sdk
from utils.config import ApiSettings
from utils.constants import API_USER_AGENT, JSON_CONTENT_TYPE

logger = logging.getLogger(__name__)


class ApiTransportError(RuntimeError):
    """The request never produced an HTTP response (DNS, refused connection, timeout)."""


class ApiContentError(RuntimeError):
    """A response arrived but its body could not be decoded (e.g. corrupt gzip)."""


@dataclass(frozen=True)
class CareerRequest:
    resource: str
    headers: Mapping[str, str] = field(default_factory=dict)
    method: str = "GET"

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def build_get(resource: str, user_agent: str = API_USER_AGENT) -> CareerRequest:
    return CareerRequest(
        resource=resource,
        headers={
            "Accept": JSON_CONTENT_TYPE,
            "User-Agent": user_agent,
        },
    )


def create_career_client(
    settings: ApiSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        transport=transport,
    )


@asynccontextmanager
async def career_client(
    settings: ApiSettings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[httpx.AsyncClient]:
    client = create_career_client(settings, transport)
    logger.info("Career API client initialized for %s", settings.base_url)
    try:
        yield client
    finally:
        await client.aclose()
        logger.info("Career API client closed")


async def send(client: httpx.AsyncClient, request: CareerRequest) -> httpx.Response:
    try:
        return await client.request(request.method, request.resource, headers=dict(request.headers))
    except httpx.DecodingError as exc:
        error_msg = f"Malformed content for {request.method} {request.resource}: {exc}"
        logger.warning(error_msg)
        with sentry_sdk.push_scope() as scope:
            scope.set_tag("component", "career_client.send")
            scope.set_extra("resource", request.resource)
            scope.set_extra("method", request.method)
            sentry_sdk.capture_message(error_msg, level="warning")
        raise ApiContentError(error_msg) from exc
    except httpx.TransportError as exc:
        error_msg = f"Transport failure for {request.method} {request.resource}: {type(exc).__name__}: {exc}"
        logger.exception(error_msg)
        with sentry_sdk.push_scope() as scope:
            scope.set_tag("component", "career_client.send")
            scope.set_extra("resource", request.resource)
            scope.set_extra("method", request.method)
            sentry_sdk.capture_exception(exc)
        raise ApiTransportError(error_msg) from exc
