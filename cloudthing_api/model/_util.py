# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from datetime import datetime, timezone
from dateutil import parser


class _DateUtil(object):

    @staticmethod
    def to_timestring(dt: datetime):
        """Format a datetime as RFC 3339 timestring in UTC, e.g.
        2024-01-01T12:00:00Z."""
        return dt.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')

    @staticmethod
    def to_datetime(string):
        """Parse an ISO timestring as datetime object."""
        return parser.parse(string)

    @staticmethod
    def now():
        """Provide the current time as datetime object."""
        return datetime.now(timezone.utc)

    @staticmethod
    def ensure_timestring(time):
        """Ensure that a given date/time is formatted as timezone aware
        RFC 3339 timestring in UTC. A static string 'now' will be converted
        to the current datetime. None is passed through."""
        if time is None:
            return None
        if time == 'now':
            return _DateUtil.to_timestring(_DateUtil.now())
        if not isinstance(time, datetime):
            time = _DateUtil.to_datetime(time)
        if not time.tzinfo:
            raise ValueError("A specified datetime needs to be timezone aware.")
        return _DateUtil.to_timestring(time)
