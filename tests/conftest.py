from collections.abc import Callable
from pathlib import Path

import pytest
from positions.outcome import Outcome, ValidationResult
from utils.config import ApiSettings, load_settings


@pytest.fixture(scope="session")
def settings() -> ApiSettings:
    return load_settings(Path(__file__).parent.parent / "appsettings.json")


@pytest.fixture
def require_pass() -> Callable[[ValidationResult], None]:
    """Map a tri-state result onto pytest: inconclusive skips, fail fails."""
    def check(result: ValidationResult) -> None:
        if result.outcome is Outcome.INCONCLUSIVE:
            pytest.skip(result.reason)
        if result.outcome is Outcome.FAIL:
            pytest.fail(result.reason)
    return check
