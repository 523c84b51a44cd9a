# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

# pylint: disable=redefined-outer-name

from datetime import datetime, timedelta, timezone

import pytest
import responses
from responses import matchers

from cloudthing_api import CloudThingApi, CloudThingApiError
from cloudthing_api.model import CommandPoint, DataPoint, EventPoint

from tests.utils import API_URL, build_api, href, request_json


@pytest.fixture(scope='function')
def ct() -> CloudThingApi:
    """Provide an authenticated API instance."""
    return build_api()


def test_build_resources_path(ct):
    """Verify that the series link is built for objects and links."""
    device = ct.devices.hydrate({'href': href('devices/d1')})

    assert ct.resources.build_resources_path(device, 'data') == href('devices/d1/resources/data')
    assert ct.resources.build_resources_path(device, 'events', 'door') == href('devices/d1/resources/events/door')
    assert ct.resources.build_resources_path('groups/g1/', 'commands') == 'groups/g1/resources/commands'
    assert ct.resources.build_resources_path('devices/d1', 'data', 'a/b c?') == 'devices/d1/resources/data/a%2Fb%20c%3F'


def test_get_data(ct):
    """Verify that data points are read within a time range."""
    device = ct.devices.hydrate({'href': href('devices/d1')})
    start = datetime(2024, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))

    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.GET,
                 url=API_URL + 'devices/d1/resources/data/temp',
                 status=200,
                 json={'href': href('devices/d1/resources/data/temp'), 'size': 2, 'limit': 100, 'page': 1,
                       'items': [{'time': '2024-01-01T00:00:00Z', 'value': 21.5, 'key': 'temp'},
                                 {'time': '2024-01-01T00:05:00Z', 'value': 21.7, 'key': 'temp',
                                  'geo': {'lat': 48.1, 'lng': 11.5}}]},
                 match=[matchers.query_param_matcher({'limit': '100',
                                                      'start': '2024-01-01T00:00:00Z',
                                                      'end': '2024-01-02T00:00:00Z'})])
        points, list_params = ct.resources.get_data(device, 'temp', start=start,
                                                    end='2024-01-02T00:00:00Z', limit=100)

    assert points == [DataPoint(time='2024-01-01T00:00:00Z', value=21.5, key='temp'),
                      DataPoint(time='2024-01-01T00:05:00Z', value=21.7, key='temp',
                                geo={'lat': 48.1, 'lng': 11.5})]
    assert list_params.size == 2


def test_get_events_and_commands(ct):
    """Verify that events and commands are read as such."""
    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.GET, url=API_URL + 'clusters/c1/resources/events', status=200,
                 json={'items': [{'time': '2024-01-01T00:00:00Z', 'payload': {'open': True}, 'key': 'door'}]})
        rsps.add(method=responses.GET, url=API_URL + 'clusters/c1/resources/commands', status=200,
                 json={'items': [{'time': '2024-01-01T00:00:00Z', 'payload': {'delay': 5}, 'key': 'reboot'}]})

        events, _ = ct.resources.get_events('clusters/c1')
        commands, _ = ct.resources.get_commands('clusters/c1')

    assert events == [EventPoint(time='2024-01-01T00:00:00Z', payload={'open': True}, key='door')]
    assert isinstance(commands[0], CommandPoint)
    assert commands[0].payload == {'delay': 5}


def test_naive_datetime(ct):
    """Verify that a time range needs to be timezone aware."""
    with responses.RequestsMock() as rsps:
        with pytest.raises(ValueError):
            ct.resources.get_data('devices/d1', start=datetime(2024, 1, 1))
        assert not rsps.calls


@pytest.mark.parametrize('body', [[], {'items': 5}, {'items': {'time': '2024-01-01T00:00:00Z'}}])
def test_get_data_malformed(ct, body):
    """Verify that a response which is not a proper collection is rejected."""
    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.GET, url=API_URL + 'devices/d1/resources/data', status=200, json=body)
        with pytest.raises(ValueError):
            ct.resources.get_data(href('devices/d1'))

@pytest.mark.parametrize('status', [200, 201])
def test_write_data(ct, status):
    """Verify that data points are written and either success status is
    accepted."""
    points = [DataPoint(time=datetime(2024, 1, 1, tzinfo=timezone.utc), value=1, key='temp'),
              DataPoint(time='2024-01-01T00:01:00Z', value=2)]

    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.POST, url=API_URL + 'devices/d1/resources/data', status=status,
                 json=[{'time': '2024-01-01T00:00:00Z', 'value': 1, 'key': 'temp'},
                       {'time': '2024-01-01T00:01:00Z', 'value': 2, 'key': 'temp'}])
        written = ct.resources.write_data('devices/d1', points)
        body = request_json(rsps.calls[0])

    assert body == [{'time': '2024-01-01T00:00:00Z', 'value': 1, 'key': 'temp'},
                    {'time': '2024-01-01T00:01:00Z', 'value': 2}]
    assert [p.value for p in written] == [1, 2]


def test_write_commands(ct):
    """Verify that commands are written for a group."""
    group = ct.groups.hydrate({'href': href('groups/g1')})
    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.POST, url=href('groups/g1/resources/commands'), status=201)
        written = ct.resources.write_commands(group, [CommandPoint(time='2024-01-01T00:00:00Z',
                                                                   payload={'delay': 5}, key='reboot')])
        body = request_json(rsps.calls[0])

    assert body == [{'time': '2024-01-01T00:00:00Z', 'payload': {'delay': 5}, 'key': 'reboot'}]
    assert written == []


def test_write_failure(ct):
    """Verify that other status codes result in an error."""
    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.POST, url=API_URL + 'devices/d1/resources/events', status=400, body='bad')
        with pytest.raises(CloudThingApiError) as error:
            ct.resources.write_events('devices/d1', [EventPoint(time='2024-01-01T00:00:00Z', payload={})])
    assert error.value.status_code == 400


def test_write_malformed_response(ct):
    """Verify that a write response which is not a list is rejected."""
    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.POST, url=API_URL + 'devices/d1/resources/data', status=201,
                 json={'time': '2024-01-01T00:00:00Z', 'value': 1})
        with pytest.raises(ValueError):
            ct.resources.write_data('devices/d1', [DataPoint(time='2024-01-01T00:00:00Z', value=1)])
