from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import suppress

import pytest

from fcm_options.config import get_settings
from fcm_options.utils.log import LOGGER_NAME

_ENV_VARS = (
    "FCM_DEFAULT_PRIORITY",
    "FCM_DEFAULT_TIME_TO_LIVE",
    "FCM_DRY_RUN",
    "FCM_RESTRICTED_PACKAGE_NAME",
    "FCM_LOG_DIR",
    "LOG_LEVEL",
    "LOG_MAX_BYTES",
    "LOG_BACKUP_COUNT",
)


def reset_package_logger() -> None:
    base = logging.getLogger(LOGGER_NAME)
    for h in list(base.handlers):
        base.removeHandler(h)
        with suppress(Exception):
            h.close()
    base.setLevel(logging.NOTSET)
    base.propagate = True
    base._fcm_options_configured = False


@pytest.fixture(autouse=True)
def _test_env(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # keep a developer's .env out of the settings
    monkeypatch.chdir(tmp_path_factory.mktemp("fcm_test"))
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    reset_package_logger()
    get_settings.cache_clear()
