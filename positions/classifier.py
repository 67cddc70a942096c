import json
import logging

import httpx
from positions.outcome import ValidationResult
from utils.constants import HTTP_STATUS_OK, JSON_CONTENT_TYPE
from utils.retry import describe_status

logger = logging.getLogger(__name__)

def looks_like_json(body: str) -> bool:
    trimmed = body.lstrip()
    return trimmed.startswith("{") or trimmed.startswith("[")

def classify_response(response: httpx.Response | None) -> ValidationResult:
    """Decide whether a response can be validated as JSON.

    Blocked or unreachable endpoints and non-JSON bodies are inconclusive, never
    failures. A body that looks like JSON but does not parse is a failure.
    """
    if response is None:
        return ValidationResult.failed(["Response must not be null"])

    if response.status_code != HTTP_STATUS_OK:
        reason = f"Endpoint returned {describe_status(response.status_code)}; skipping JSON validation"
        logger.warning(reason)
        return ValidationResult.inconclusive(reason)

    body = response.text
    if not body or not body.strip():
        reason = "Empty response body; cannot validate JSON structure"
        logger.warning(reason)
        return ValidationResult.inconclusive(reason)

    content_type = response.headers.get("content-type", "")
    if JSON_CONTENT_TYPE not in content_type.lower() and not looks_like_json(body):
        reason = f"Response appears to be HTML/text, not JSON. Content-Type: {content_type}"
        logger.warning(reason)
        return ValidationResult.inconclusive(reason)

    try:
        document = json.loads(body)
    except json.JSONDecodeError as e:
        logger.exception("Response body is not valid JSON")
        return ValidationResult.failed([f"Response body is not valid JSON: {e}"])

    return ValidationResult.passed(document)
