import logging
import os
from pathlib import Path

import sentry_sdk
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

if os.environ.get("CI") is None:
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

def get_sentry_dsn() -> str | None:
    return os.environ.get("SENTRY_DSN") or None

def init_sentry() -> bool:
    sentry_dsn = get_sentry_dsn()
    if not sentry_dsn:
        logger.debug("SENTRY_DSN not set, error reporting disabled")
        return False

    sentry_sdk.init(
        dsn=sentry_dsn,
        send_default_pii=False,
        environment=os.getenv("ENV", "production"),
    )
    logger.info("Sentry error reporting enabled")
    return True
