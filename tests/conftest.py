import logging
import os

import pytest


# List of environment variables that may be modified by tests
_ENV_VARS_TO_ISOLATE = [
    "TOLCALC_LOG_LEVEL",
    "TOLCALC_LOG_JSON",
    "TOLCALC_DEFAULT_GRADE",
    "TOLCALC_DISPLAY_DECIMALS",
]


@pytest.fixture(autouse=True)
def env_isolation():
    """Isolate environment variables between tests."""
    backup = {k: os.environ.get(k) for k in _ENV_VARS_TO_ISOLATE}
    try:
        yield
    finally:
        for k, v in backup.items():
            if v is None:
                os.environ.pop(k, None)
            else:
                os.environ[k] = v


@pytest.fixture(autouse=True)
def settings_isolation():
    """Drop the cached settings so env changes made by a test take effect."""
    from tolcalc.core.config import reset_settings

    reset_settings()
    yield
    reset_settings()


@pytest.fixture(autouse=True)
def root_logger_isolation():
    """Restore root logger handlers replaced by setup_logging()."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
