import httpx
import pytest
from positions.classifier import classify_response, looks_like_json
from positions.fixtures import MOCK_JOB_DESCRIPTION_JSON, mock_response
from positions.outcome import Outcome


def test_classify_response_none_is_failure() -> None:
    result = classify_response(None)

    assert result.outcome is Outcome.FAIL
    assert result.violations == ("Response must not be null",)

@pytest.mark.parametrize("status_code", [403, 404, 429, 500, 503])
def test_classify_response_non_ok_is_inconclusive(status_code: int) -> None:
    result = classify_response(mock_response(status_code))

    assert result.outcome is Outcome.INCONCLUSIVE
    assert f"Endpoint returned {status_code}" in result.reason

def test_classify_response_forbidden_reason_has_phrase() -> None:
    result = classify_response(mock_response(403, body="<html>Access denied</html>", content_type="text/html"))

    assert result.reason == "Endpoint returned 403 Forbidden; skipping JSON validation"

@pytest.mark.parametrize("body", ["", "   ", "\n\t"])
def test_classify_response_empty_body_is_inconclusive(body: str) -> None:
    result = classify_response(mock_response(200, body=body))

    assert result.outcome is Outcome.INCONCLUSIVE
    assert result.outcome is not Outcome.FAIL
    assert "Empty response body" in result.reason

def test_classify_response_html_is_inconclusive() -> None:
    result = classify_response(mock_response(200, body="<html><body>Blocked</body></html>", content_type="text/html"))

    assert result.outcome is Outcome.INCONCLUSIVE
    assert "Content-Type: text/html" in result.reason

def test_classify_response_json_body_without_json_content_type() -> None:
    result = classify_response(mock_response(200, body=MOCK_JOB_DESCRIPTION_JSON, content_type="text/plain"))

    assert result.outcome is Outcome.PASS
    assert result.document["suitableForStudents"] is True

def test_classify_response_json_array_without_content_type() -> None:
    result = classify_response(mock_response(200, body='  [{"description": "x"}]', content_type=None))

    assert result.outcome is Outcome.PASS
    assert result.document == [{"description": "x"}]

def test_classify_response_content_type_is_case_insensitive() -> None:
    response = httpx.Response(
        200,
        content=b'{"description": "x"}',
        headers={"Content-Type": "Application/JSON; charset=utf-8"},
    )

    assert classify_response(response).outcome is Outcome.PASS

def test_classify_response_broken_json_is_failure() -> None:
    result = classify_response(mock_response(200, body='{"description": '))

    assert result.outcome is Outcome.FAIL
    assert "not valid JSON" in result.reason

def test_looks_like_json() -> None:
    assert looks_like_json('  {"a": 1}')
    assert looks_like_json("[1, 2]")
    assert not looks_like_json("<!doctype html>")
