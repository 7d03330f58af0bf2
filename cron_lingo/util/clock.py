# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Final, Optional

from cron_lingo.errors import IndeterminateOffsetError
from cron_lingo.observability.powertools_logging import powertools_logger
from cron_lingo.util.lingo_env import get_lingo_env
from cron_lingo.util.time import to_fixed_offset

logger: Final = powertools_logger()


class Clock(ABC):
    """Source of the current instant, the only environment dependency of the library"""

    @abstractmethod
    def now(self, offset: timezone) -> datetime:
        """the current instant expressed in `offset`"""

    @abstractmethod
    def local_offset(self) -> timezone:
        """
        the offset of the host's local time
        :raises IndeterminateOffsetError: if the offset cannot be established
        """

    def now_local(self) -> datetime:
        return self.now(self.local_offset())


class SystemClock(Clock):
    def __init__(self, local_offset: Optional[timezone] = None) -> None:
        """
        :param local_offset: fixed offset to treat as local, defaults to the
            CRON_LINGO_LOCAL_OFFSET setting and then to the host's offset
        """
        self._local_offset = local_offset

    def now(self, offset: timezone) -> datetime:
        return datetime.now(offset)

    def local_offset(self) -> timezone:
        if self._local_offset is not None:
            return self._local_offset

        configured = get_lingo_env().local_offset
        if configured is not None:
            return configured

        try:
            return to_fixed_offset(datetime.now().astimezone())
        except (OSError, OverflowError, ValueError) as err:
            logger.warning(f"Unable to determine the local offset of the host: {err}")
            raise IndeterminateOffsetError(
                f"the local offset could not be determined: {err}"
            ) from err
