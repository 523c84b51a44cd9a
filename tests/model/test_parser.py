# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

# pylint: disable=redefined-outer-name

import pytest

from cloudthing_api import CloudThingApi
from cloudthing_api.model import Application, Cluster, Device, Directory, Export, Membership
from cloudthing_api.model._parser import ResourceParser  # noqa

from tests.utils import build_api, href, read_json


@pytest.fixture(scope='function')
def ct() -> CloudThingApi:
    """Provide an authenticated API instance."""
    return build_api()


def test_from_json_simple():
    """Verify that scalar fields are copied by their mapping and unknown
    JSON fields are ignored."""
    class TestClass:
        """Encapsulating test data."""
        def __init__(self):
            self._links = {}
            self.int_field = None
            self.string_field = None

    parser = ResourceParser({'int_field': 'dbInt', 'string_field': 'dbString'})
    source_json = {'dbInt': 42, 'dbString': 'value', 'ignored': 1, 'createdAt': '2024-01-01T00:00:00Z'}

    obj = parser.from_json(source_json, TestClass())

    assert obj.int_field == 42
    assert obj.string_field == 'value'
    assert obj.created_at == '2024-01-01T00:00:00Z'
    assert 'ignored' not in obj.__dict__


def test_link_only(ct):
    """Verify that a relation holding just an href is kept as link."""
    application = ct.applications.hydrate({
        'href': href('applications/abc'),
        'directory': {'href': href('directories/dir1')}})

    assert application.directory is None
    assert application.link('directory') == (False, href('directories/dir1'))


def test_expanded(ct):
    """Verify that an expanded relation is hydrated using the target
    service and its link is kept as well."""
    application = ct.applications.hydrate(read_json('application.json'))

    assert isinstance(application.directory, Directory)
    assert application.directory.name == 'Fleet users'
    assert application.directory.service is ct.directories
    assert application.link('directory') == (True, href('directories/dir1'))
    # nested links of the expanded object are available as well
    assert application.directory.link('users') == (False, href('directories/dir1/users'))


def test_absent(ct):
    """Verify that absent and null relations result in an empty link."""
    application = ct.applications.hydrate({'href': href('applications/abc'), 'directory': None})

    assert application.directory is None
    assert application.link('directory') == (False, '')
    assert application.link('clusters') == (False, '')


@pytest.mark.parametrize('value', ['directories/dir1', 123, ['a', 'b'], True])
def test_malformed_relation(ct, value):
    """Verify that a relation which is not an object is rejected."""
    with pytest.raises(ValueError) as error:
        ct.applications.hydrate({'href': href('applications/abc'), 'directory': value})
    assert 'directory' in str(error.value)


def test_not_an_object(ct):
    """Verify that a JSON which is not an object is rejected."""
    with pytest.raises(ValueError):
        ct.applications.hydrate(['not', 'an', 'object'])


def test_expanded_collection(ct):
    """Verify that an expanded collection is hydrated item by item
    preserving the order."""
    cluster = ct.clusters.hydrate(read_json('cluster.json'))

    assert [d.get_id() for d in cluster.devices] == ['d1', 'd2']
    assert all(isinstance(d, Device) for d in cluster.devices)
    assert all(d.service is ct.devices for d in cluster.devices)
    assert cluster.devices[0].custom == {'plate': 'AB-123'}
    assert cluster.devices[0].link('product') == (False, href('products/p1'))
    assert cluster.link('devices') == (True, href('clusters/c1/devices'))
    assert cluster.link('memberships') == (False, href('clusters/c1/memberships'))


def test_nested_expansion(ct):
    """Verify that expansions are hydrated recursively."""
    application = ct.applications.hydrate({
        'href': href('applications/abc'),
        'clusters': {
            'href': href('applications/abc/clusters'),
            'items': [read_json('cluster.json')]}})

    cluster = application.clusters[0]
    assert isinstance(cluster, Cluster)
    assert cluster.devices[1].token == 'tok-d2'


def test_link_only_relation(ct):
    """Verify that link-only relations are never hydrated, even if the
    server provides more than the href."""
    export = ct.exports.hydrate(read_json('export.json'))

    assert export.limits is None
    assert export.link('limits') == (False, href('groups/g1'))
    # other relations are expanded as usual
    assert export.link('product') == (True, href('products/p1'))


def test_expanded_without_client():
    """Verify that an expanded relation cannot be hydrated without
    a client reference, while links can."""
    with pytest.raises(ValueError):
        Application.from_json(read_json('application.json'))

    membership = Membership.from_json({
        'href': href('memberships/m1'),
        'user': {'href': href('users/u1')},
        'usergroup': {'href': href('usergroups/g1')}})
    assert membership.link('user') == (False, href('users/u1'))


def test_idempotence(ct):
    """Verify that hydrating the same payload twice results in the same
    scalar and link values."""
    application_json = read_json('application.json')

    a1 = ct.applications.hydrate(application_json)
    a2 = ct.applications.hydrate(application_json)

    assert a1 is not a2
    for name in ('href', 'created_at', 'updated_at', 'name', 'official', 'description', 'status', 'custom'):
        assert a1.__dict__[name] == a2.__dict__[name]
    for relation in ('tenant', 'directory', 'devices', 'clusters'):
        assert a1.link(relation) == a2.link(relation)
    assert a1.directory.name == a2.directory.name
    # the source is not modified
    assert application_json == read_json('application.json')


def test_to_json_strips_server_fields(ct):
    """Verify that server assigned fields and unset values are never
    part of a create or update payload."""
    application = ct.applications.hydrate(read_json('application.json'))
    application.description = None

    update_json = application.to_update_json()

    assert update_json == {'name': 'Fleet Tracker', 'status': 'ENABLED', 'custom': {'region': 'eu-central'}}
    for key in ('href', 'createdAt', 'updatedAt', 'official', 'directory'):
        assert key not in update_json


def test_to_json_links(ct):
    """Verify that links are formatted as href objects."""
    export = ct.exports.hydrate(read_json('export.json'))

    create_json = export.to_create_json()

    assert create_json['limits'] == {'href': href('groups/g1')}
    assert create_json['product'] == {'href': href('products/p1')}
    assert create_json['tenantImp'] == {'href': href('tenants/T999')}
    assert create_json['modelType'] == 'DEVICE'
    # the exporting tenant is assigned by the server
    assert 'tenantExp' not in create_json
    # unset relations are not sent
    assert 'tenantExportingPermissionExport' not in create_json


def test_unknown_relation():
    """Verify that unknown relation names are rejected."""
    with pytest.raises(ValueError) as error:
        Export().link('owner')
    assert 'owner' in str(error.value)
