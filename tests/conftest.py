# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from collections.abc import Iterator
from os import environ
from unittest.mock import patch

from pytest import fixture

import cron_lingo.util.lingo_env

TEST_LOCAL_OFFSET = "+00:00"


@fixture(autouse=True)
def lingo_environment() -> Iterator[None]:
    # pin the local offset so nothing depends on the offset of the host running the tests
    test_env = {"CRON_LINGO_LOCAL_OFFSET": TEST_LOCAL_OFFSET}
    with patch.dict(environ, test_env, clear=True):
        cron_lingo.util.lingo_env._lingo_env = None
        yield
    cron_lingo.util.lingo_env._lingo_env = None
