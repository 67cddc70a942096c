API_BASE_URL = "https://webapi.alza.cz/api/career/v2/positions/"
VALID_POSITION = "java-developer-"
INVALID_POSITION = "invalid-position-name"
MAX_ATTEMPTS = 3
BASE_DELAY_MS = 500
REQUEST_TIMEOUT_SECONDS = 15.0
HTTP_STATUS_OK = 200
HTTP_STATUS_FORBIDDEN = 403
HTTP_STATUS_TOO_MANY_REQUESTS = 429
HTTP_STATUS_SERVICE_UNAVAILABLE = 503
RETRYABLE_STATUS_CODES = frozenset({
    HTTP_STATUS_FORBIDDEN,
    HTTP_STATUS_TOO_MANY_REQUESTS,
    HTTP_STATUS_SERVICE_UNAVAILABLE,
})
JSON_CONTENT_TYPE = "application/json"
API_USER_AGENT = "AlzaApiTests/1.0 (+https://example.local)"
SETTINGS_FILE = "appsettings.json"
SETTINGS_SECTION = "CareerApi"
EXPECTED_WORK_LOCATION = {
    "name": "Hall office park",
    "country": "Česká republika",
    "city": "Praha",
    "address": "U Pergamenky 2",
}
EXPECTED_POSTAL_CODE = 17000
EXPECTED_EXECUTIVE_NAME = "Kozák Michal"
EXECUTIVE_TEXT_FIELDS = ["photo", "description"]
