# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Tuple, Type
from urllib.parse import quote

from cloudthing_api._base_api import CloudThingRestApi, CloudThingApiError
from cloudthing_api.model._base import ListParams, ResourceOwner
from cloudthing_api.model._util import _DateUtil


def _format_time(time: str | datetime) -> str:
    if isinstance(time, datetime):
        return _DateUtil.ensure_timestring(time)
    return time


@dataclass
class DataPoint:
    """A single value of a data series at a specific time."""
    time: str | datetime
    value: Any
    key: str | None = None
    geo: dict | None = None

    @classmethod
    def from_json(cls, json: dict) -> DataPoint:
        # pylint: disable=missing-function-docstring
        if not isinstance(json, dict):
            raise ValueError(f"Unexpected data point format: {json}")
        return cls(time=json.get('time'), value=json.get('value'), key=json.get('key'), geo=json.get('geo'))

    def to_json(self) -> dict:
        # pylint: disable=missing-function-docstring
        json = {'time': _format_time(self.time), 'value': self.value}
        if self.key:
            json['key'] = self.key
        if self.geo:
            json['geo'] = self.geo
        return json


@dataclass
class EventPoint:
    """A single event with payload at a specific time."""
    time: str | datetime
    payload: Any
    key: str | None = None
    geo: dict | None = None

    @classmethod
    def from_json(cls, json: dict) -> EventPoint:
        # pylint: disable=missing-function-docstring
        if not isinstance(json, dict):
            raise ValueError(f"Unexpected event point format: {json}")
        return cls(time=json.get('time'), payload=json.get('payload'), key=json.get('key'), geo=json.get('geo'))

    def to_json(self) -> dict:
        # pylint: disable=missing-function-docstring
        json = {'time': _format_time(self.time), 'payload': self.payload}
        if self.key:
            json['key'] = self.key
        if self.geo:
            json['geo'] = self.geo
        return json


class CommandPoint(EventPoint):
    """A single command with payload at a specific time."""


class Resources:
    """Provides access to the telemetry resources of devices, clusters
    and groups, i.e. their data, event and command series.

    The owner of a series can be given as object (Device, Cluster, Group)
    or as link to it.
    """

    def __init__(self, ct: CloudThingRestApi):
        self.ct = ct

    @staticmethod
    def build_resources_path(owner: str | ResourceOwner, kind: str, key: str = None) -> str:
        """Build the link to a series of a resource owner.

        Args:
            owner (str|ResourceOwner):  Owning object or its link
            kind (str):  One of 'data', 'events' or 'commands'
            key (str):  Key of a specific series

        Returns:
            The link to the series.
        """
        if isinstance(owner, ResourceOwner):
            return owner._resources_link(kind, key)  # pylint: disable=protected-access
        link = f'{owner.rstrip("/")}/resources/{kind}'
        return f"{link}/{quote(key, safe='')}" if key else link

    def get_data(self, owner: str | ResourceOwner, key: str = None,
                 start: str | datetime = None, end: str | datetime = None,
                 limit: int = None, page: int = None) -> Tuple[List[DataPoint], ListParams]:
        """Read data points of a resource owner.

        Args:
            owner (str|ResourceOwner):  Owning object or its link
            key (str):  Limit to a specific series key
            start (str|datetime):  Start of the time range (timezone aware)
            end (str|datetime):  End of the time range (timezone aware)
            limit (int):  Page size
            page (int):  Page number

        Returns:
            A tuple of the data points and the collection's pagination
            information.
        """
        return self._read(DataPoint, owner, 'data', key, start, end, limit, page)

    def get_events(self, owner: str | ResourceOwner, key: str = None,
                   start: str | datetime = None, end: str | datetime = None,
                   limit: int = None, page: int = None) -> Tuple[List[EventPoint], ListParams]:
        """Read events of a resource owner. See `get_data` for the arguments."""
        return self._read(EventPoint, owner, 'events', key, start, end, limit, page)

    def get_commands(self, owner: str | ResourceOwner, key: str = None,
                     start: str | datetime = None, end: str | datetime = None,
                     limit: int = None, page: int = None) -> Tuple[List[CommandPoint], ListParams]:
        """Read commands of a resource owner. See `get_data` for the arguments."""
        return self._read(CommandPoint, owner, 'commands', key, start, end, limit, page)

    def write_data(self, owner: str | ResourceOwner, points: List[DataPoint]) -> List[DataPoint]:
        """Write data points for a resource owner.

        Returns:
            The data points as stored within the database.
        """
        return self._write(DataPoint, owner, 'data', points)

    def write_events(self, owner: str | ResourceOwner, points: List[EventPoint]) -> List[EventPoint]:
        """Write events for a resource owner."""
        return self._write(EventPoint, owner, 'events', points)

    def write_commands(self, owner: str | ResourceOwner, points: List[CommandPoint]) -> List[CommandPoint]:
        """Write commands for a resource owner."""
        return self._write(CommandPoint, owner, 'commands', points)

    def _read(self, point_class: Type, owner, kind, key, start, end, limit, page) -> Tuple[List[Any], ListParams]:
        params = {'start': _DateUtil.ensure_timestring(start),
                  'end': _DateUtil.ensure_timestring(end)}
        result_json = self.ct.get(self.build_resources_path(owner, kind, key),
                                  limit=limit, page=page, params=params)
        if not isinstance(result_json, dict):
            raise ValueError(f"Unexpected {kind} response format. "
                             f"Expected an object, got: {type(result_json).__name__}")
        items_json = result_json.get('items') or []
        if not isinstance(items_json, list):
            raise ValueError(f"Unexpected {kind} items format. Expected a list, got: {type(items_json).__name__}")
        return [point_class.from_json(x) for x in items_json], ListParams.from_json(result_json)

    def _write(self, point_class: Type, owner, kind, points) -> List[Any]:
        r = self.ct.request('POST', self.build_resources_path(owner, kind),
                            json=[p.to_json() for p in points])
        if r.status_code not in (200, 201):
            raise CloudThingApiError.from_response(r)
        if not r.content:
            return []
        result_json = r.json()
        if not isinstance(result_json, list):
            raise ValueError(f"Unexpected {kind} response format. Expected a list, got: {type(result_json).__name__}")
        return [point_class.from_json(x) for x in result_json]
