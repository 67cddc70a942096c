import asyncio
import logging
import sys

from checks.runner import run_position_checks
from logging_config import setup_logging
from utils.config import load_settings
from utils.sentry import init_sentry

logger = logging.getLogger(__name__)

def main() -> int:
    setup_logging()
    init_sentry()

    summary = asyncio.run(run_position_checks(load_settings()))

    for name, result in summary["results"].items():
        logger.info("%-16s %-12s %s", name, result.outcome.value.upper(), result.reason)
    logger.info(
        "Passed: %s, failed: %s, inconclusive: %s",
        summary["passed"], summary["failed"], summary["inconclusive"]
    )
    return 1 if summary["failed"] else 0

if __name__ == "__main__":
    sys.exit(main())
