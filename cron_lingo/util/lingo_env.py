# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from datetime import timezone
from os import environ
from typing import Optional

from cron_lingo.util.time import parse_offset

DEFAULT_LOG_SERVICE = "cron-lingo"


@dataclass(frozen=True)
class LingoEnv:
    local_offset: Optional[timezone]
    enable_debug_logging: bool
    log_service: str


# cache the library environment, it is read once per process
_lingo_env: Optional[LingoEnv] = None


def get_lingo_env() -> LingoEnv:
    """
    Retrieve the library environment. All settings are optional.

    Do not retrieve settings directly from the environment elsewhere. Components that need
    a setting accept it as a constructor argument and only fall back to this environment
    when the caller did not provide one, which keeps them testable without patching
    `os.environ`.
    """
    global _lingo_env
    if not _lingo_env:
        _lingo_env = _from_environment()
    return _lingo_env


class LingoEnvError(RuntimeError):
    pass


def _from_environment() -> LingoEnv:
    try:
        return LingoEnv(
            local_offset=_optional_offset(environ.get("CRON_LINGO_LOCAL_OFFSET")),
            enable_debug_logging=env_to_bool(environ.get("CRON_LINGO_TRACE", "")),
            log_service=environ.get("CRON_LINGO_LOG_SERVICE", "").strip()
            or DEFAULT_LOG_SERVICE,
        )
    except ValueError as err:
        raise LingoEnvError(
            f"Invalid value for CRON_LINGO_LOCAL_OFFSET: {err}"
        ) from err


def _optional_offset(value: Optional[str]) -> Optional[timezone]:
    if value is None or not value.strip():
        return None
    return parse_offset(value)


def env_to_bool(value: str) -> bool:
    return value.strip().lower() in {"true", "yes"}
