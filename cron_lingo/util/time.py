# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
import re
from datetime import datetime, timedelta, timezone

OFFSET_FORMAT = "+HH:MM"
"""human-readable offset format that can be displayed to users if parse_offset fails"""

_offset_re = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def is_aware(dt: datetime) -> bool:
    """
    Returns `True` if the `datetime` is timezone-aware.

    [[Documentation] Determining if an Object is Aware or Naive](https://docs.python.org/3/library/datetime.html#determining-if-an-object-is-aware-or-naive)
    """
    return dt.tzinfo is not None and dt.tzinfo.utcoffset(dt) is not None


def parse_offset(offset_str: str) -> timezone:
    """
    Build a fixed-offset timezone from a string such as "+02:00", "-0530", "Z" or "UTC"
    :param offset_str: offset string in the format described by OFFSET_FORMAT
    :return: the fixed offset
    """
    value = offset_str.strip()
    if value.upper() in {"Z", "UTC"}:
        return timezone.utc

    if not (match := _offset_re.match(value)):
        raise ValueError(
            f"Invalid offset string {offset_str}, must match {OFFSET_FORMAT}"
        )

    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise ValueError(f"Offset out of range: {offset_str}")

    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def to_fixed_offset(dt: datetime) -> timezone:
    """the fixed offset in effect for an aware `datetime`"""
    offset = dt.utcoffset()
    if offset is None:
        raise ValueError(
            f"Expected a timezone-aware datetime, received {dt.isoformat()}"
        )
    return timezone(offset)
