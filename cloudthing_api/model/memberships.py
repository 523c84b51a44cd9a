# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import List, Tuple

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import CloudThingObject, CloudThingResource, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class Membership(CloudThingObject):
    """Represent the membership of a user within a usergroup.

    Memberships cannot be updated, only created and deleted.
    """
    _parser = ResourceParser({}, [
        Relation('user', service='users'),
        Relation('usergroup', service='usergroups'),
    ])
    _create_links = ('user', 'usergroup')

    def __init__(self, service: Memberships = None,
                 user: str | CloudThingObject = None, usergroup: str | CloudThingObject = None):
        super().__init__(service=service)
        if user:
            self.set_link('user', user)
        if usergroup:
            self.set_link('usergroup', usergroup)


class ClusterMembership(CloudThingObject):
    """Represent the membership of a device within a cluster."""
    _parser = ResourceParser({}, [
        Relation('device', service='devices'),
        Relation('cluster', service='clusters'),
        Relation('application', service='applications'),
    ])
    _create_links = ('device', 'cluster')

    def __init__(self, service: ClusterMemberships = None,
                 device: str | CloudThingObject = None, cluster: str | CloudThingObject = None):
        super().__init__(service=service)
        if device:
            self.set_link('device', device)
        if cluster:
            self.set_link('cluster', cluster)


class GroupMembership(CloudThingObject):
    """Represent the membership of a device within a group."""
    _parser = ResourceParser({}, [
        Relation('device', service='devices'),
        Relation('group', service='groups'),
    ])
    _create_links = ('device', 'group')

    def __init__(self, service: GroupMemberships = None,
                 device: str | CloudThingObject = None, group: str | CloudThingObject = None):
        super().__init__(service=service)
        if device:
            self.set_link('device', device)
        if group:
            self.set_link('group', group)


class Memberships(CloudThingResource):
    """Provides access to the (user) Membership API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'memberships', Membership)

    def list_by_user(self, user_id: str, **options) -> Tuple[List[Membership], ListParams]:
        """List the memberships of a user."""
        return self.list_by_link(self.build_parent_path('users', user_id), **options)

    def list_by_usergroup(self, usergroup_id: str, **options) -> Tuple[List[Membership], ListParams]:
        """List the memberships of a usergroup."""
        return self.list_by_link(self.build_parent_path('usergroups', usergroup_id), **options)

    def create_by_user(self, user_id: str, membership: Membership) -> Membership:
        """Create a membership for a user."""
        return self.create_by_link(self.build_parent_path('users', user_id), membership)

    def create_by_usergroup(self, usergroup_id: str, membership: Membership) -> Membership:
        """Create a membership for a usergroup."""
        return self.create_by_link(self.build_parent_path('usergroups', usergroup_id), membership)

    def create_by_link(self, href: str, membership: Membership) -> Membership:
        """Create a membership within a collection given by link."""
        return self._create_by_link(href, membership)


class ClusterMemberships(CloudThingResource):
    """Provides access to the Cluster Membership API.

    Note: the memberships of a cluster are available at
    `clusters/{id}/memberships`, the ones of a device at
    `devices/{id}/clusterMemberships`.
    """

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'clusterMemberships', ClusterMembership)

    def list_by_device(self, device_id: str, **options) -> Tuple[List[ClusterMembership], ListParams]:
        """List the cluster memberships of a device."""
        return self.list_by_link(self.build_parent_path('devices', device_id), **options)

    def list_by_cluster(self, cluster_id: str, **options) -> Tuple[List[ClusterMembership], ListParams]:
        """List the memberships of a cluster."""
        return self.list_by_link(self.build_parent_path('clusters', cluster_id, 'memberships'), **options)

    def create_by_device(self, device_id: str, membership: ClusterMembership) -> ClusterMembership:
        """Create a cluster membership for a device."""
        return self.create_by_link(self.build_parent_path('devices', device_id), membership)

    def create_by_cluster(self, cluster_id: str, membership: ClusterMembership) -> ClusterMembership:
        """Create a membership for a cluster."""
        return self.create_by_link(self.build_parent_path('clusters', cluster_id, 'memberships'), membership)

    def create_by_link(self, href: str, membership: ClusterMembership) -> ClusterMembership:
        """Create a cluster membership within a collection given by link."""
        return self._create_by_link(href, membership)


class GroupMemberships(CloudThingResource):
    """Provides access to the Group Membership API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'groupMemberships', GroupMembership)

    def list_by_device(self, device_id: str, **options) -> Tuple[List[GroupMembership], ListParams]:
        """List the group memberships of a device."""
        return self.list_by_link(self.build_parent_path('devices', device_id), **options)

    def list_by_group(self, group_id: str, **options) -> Tuple[List[GroupMembership], ListParams]:
        """List the memberships of a group."""
        return self.list_by_link(self.build_parent_path('groups', group_id), **options)

    def create_by_device(self, device_id: str, membership: GroupMembership) -> GroupMembership:
        """Create a group membership for a device."""
        return self.create_by_link(self.build_parent_path('devices', device_id), membership)

    def create_by_group(self, group_id: str, membership: GroupMembership) -> GroupMembership:
        """Create a membership for a group."""
        return self.create_by_link(self.build_parent_path('groups', group_id), membership)

    def create_by_link(self, href: str, membership: GroupMembership) -> GroupMembership:
        """Create a group membership within a collection given by link."""
        return self._create_by_link(href, membership)
