# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from datetime import timedelta, timezone
from os import environ
from unittest.mock import patch

from pytest import raises

from cron_lingo.util.lingo_env import (
    DEFAULT_LOG_SERVICE,
    LingoEnv,
    LingoEnvError,
    env_to_bool,
    get_lingo_env,
)


def test_to_bool() -> None:
    assert env_to_bool("True")
    assert env_to_bool("true")
    assert env_to_bool("true ")
    assert env_to_bool("Yes")
    assert env_to_bool(" yes")

    assert not env_to_bool("")
    assert not env_to_bool("False")
    assert not env_to_bool("\tno")
    assert not env_to_bool("Anything else")


def test_get_lingo_env() -> None:
    with patch.dict(
        environ,
        {
            "CRON_LINGO_LOCAL_OFFSET": "-04:00",
            "CRON_LINGO_TRACE": "true",
            "CRON_LINGO_LOG_SERVICE": "my-scheduler",
        },
        clear=True,
    ):
        lingo_env = get_lingo_env()
        assert get_lingo_env() is lingo_env

    assert lingo_env == LingoEnv(
        local_offset=timezone(-timedelta(hours=4)),
        enable_debug_logging=True,
        log_service="my-scheduler",
    )


def test_all_settings_are_optional() -> None:
    with patch.dict(environ, {}, clear=True):
        assert get_lingo_env() == LingoEnv(
            local_offset=None,
            enable_debug_logging=False,
            log_service=DEFAULT_LOG_SERVICE,
        )


def test_blank_offset_is_ignored() -> None:
    with patch.dict(environ, {"CRON_LINGO_LOCAL_OFFSET": "  "}, clear=True):
        assert get_lingo_env().local_offset is None


def test_invalid_offset() -> None:
    with patch.dict(
        environ, {"CRON_LINGO_LOCAL_OFFSET": "Europe/Berlin"}, clear=True
    ), raises(LingoEnvError) as err:
        get_lingo_env()

    assert str(err.value).startswith("Invalid value for CRON_LINGO_LOCAL_OFFSET")
