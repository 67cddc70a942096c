import json

import httpx
from utils.constants import JSON_CONTENT_TYPE

MOCK_JOB_DESCRIPTION_JSON = """
{
    "description": "Experienced Java developer needed for exciting projects",
    "suitableForStudents": true
}
"""

MOCK_WORK_LOCATION_JSON = """
{
    "workLocation": {
        "name": "Hall office park",
        "country": "Česká republika",
        "city": "Praha",
        "address": "U Pergamenky 2",
        "postalCode": 17000
    }
}
"""

MOCK_EXECUTIVE_USER_JSON = """
{
    "executiveUser": {
        "name": "Kozák Michal",
        "photo": "https://example.com/photo.jpg",
        "description": "Senior technical manager with 10+ years experience"
    }
}
"""

MOCK_COMPLETE_POSTING_JSON = """
{
    "description": "Experienced Java developer needed for exciting projects",
    "suitableForStudents": true,
    "workLocation": {
        "name": "Hall office park",
        "country": "Česká republika",
        "city": "Praha",
        "address": "U Pergamenky 2",
        "postalCode": 17000
    },
    "executiveUser": {
        "name": "Kozák Michal",
        "photo": "https://example.com/photo.jpg",
        "description": "Senior technical manager with 10+ years experience"
    }
}
"""

def load_mock(raw_json: str) -> dict:
    return json.loads(raw_json)

def mock_response(
    status_code: int = 200,
    body: str = MOCK_COMPLETE_POSTING_JSON,
    content_type: str | None = JSON_CONTENT_TYPE,
) -> httpx.Response:
    headers = {"Content-Type": content_type} if content_type else {}
    return httpx.Response(status_code, content=body.encode("utf-8"), headers=headers)
