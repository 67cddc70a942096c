from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from positions.outcome import ValidationResult
from scripts.check_position import main


def summary_with(failed: int) -> dict:
    results = {"connectivity": ValidationResult.passed(reason="ok")}
    if failed:
        results["work_location"] = ValidationResult.failed(["City must be 'Praha'"])
    return {"results": results, "passed": 1, "failed": failed, "inconclusive": 0}

@pytest.mark.parametrize(("failed", "exit_code"), [(0, 0), (1, 1)])
@patch("scripts.check_position.init_sentry")
@patch("scripts.check_position.setup_logging")
@patch("scripts.check_position.load_settings")
@patch("scripts.check_position.run_position_checks", new_callable=AsyncMock)
def test_main_exit_code(
    mock_run: AsyncMock,
    mock_load_settings: MagicMock,
    mock_setup_logging: MagicMock,
    mock_init_sentry: MagicMock,
    failed: int,
    exit_code: int
) -> None:
    mock_run.return_value = summary_with(failed)

    assert main() == exit_code
    mock_setup_logging.assert_called_once()
    mock_init_sentry.assert_called_once()
    mock_run.assert_awaited_once_with(mock_load_settings.return_value)
