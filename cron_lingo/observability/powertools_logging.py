# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import logging
from typing import Optional

from aws_lambda_powertools import Logger

from cron_lingo.util.lingo_env import get_lingo_env


def should_log_events(logger: Logger) -> bool:
    return logger.log_level <= logging.DEBUG


def powertools_logger(service: Optional[str] = None) -> Logger:
    env = get_lingo_env()
    logger = Logger(
        use_rfc3339=True,
        service=service or env.log_service,
        level="DEBUG" if env.enable_debug_logging else None,
    )
    return logger
