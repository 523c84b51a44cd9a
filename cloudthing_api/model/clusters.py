# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import List, Tuple

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import UpdatableObject, UpdatableResource, ResourceOwner, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class Cluster(UpdatableObject, ResourceOwner):
    """Represent a cluster of devices within an application.

    Devices join a cluster through cluster memberships, see
    `ClusterMembership`.
    """
    _parser = ResourceParser({
        'name': 'name',
        'description': 'description',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('application', service='applications'),
        Relation('groups', service='groups', collection=True),
        Relation('devices', service='devices', collection=True),
        Relation('memberships', service='cluster_memberships', collection=True),
    ])
    _create_fields = ('name', 'description', 'custom')
    _update_fields = ('name', 'description', 'custom')

    def __init__(self, service: Clusters = None, name: str = None, description: str = None, custom: dict = None):
        super().__init__(service=service)
        self.name = name
        self.description = description
        self.custom = custom


class Clusters(UpdatableResource):
    """Provides access to the Cluster API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'clusters', Cluster)

    def list_by_application(self, application_id: str, **options) -> Tuple[List[Cluster], ListParams]:
        """List the clusters of an application."""
        return self.list_by_link(self.build_parent_path('applications', application_id), **options)

    def list_by_device(self, device_id: str, **options) -> Tuple[List[Cluster], ListParams]:
        """List the clusters a device is member of."""
        return self.list_by_link(self.build_parent_path('devices', device_id), **options)

    def create_by_application(self, application_id: str, cluster: Cluster) -> Cluster:
        """Create a cluster within an application."""
        return self.create_by_link(self.build_parent_path('applications', application_id), cluster)

    def create_by_link(self, href: str, cluster: Cluster) -> Cluster:
        """Create a cluster within a collection given by link."""
        return self._create_by_link(href, cluster)
