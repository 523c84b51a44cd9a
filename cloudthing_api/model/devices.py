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


class Device(UpdatableObject, ResourceOwner):
    """Represent a device within CloudThing.

    Devices are created for a specific product. Only custom data and
    properties of a device can be set by clients; the token and
    activation state are assigned by the server.
    """
    _parser = ResourceParser({
        'token': 'token',
        'activated': 'activated',
        'custom': 'custom',
        'properties': 'properties'
    }, [
        Relation('tenant', service='tenant'),
        Relation('product', service='products'),
        Relation('clusters', service='clusters', collection=True),
        Relation('groups', service='groups', collection=True),
        Relation('cluster_memberships', 'clusterMemberships', service='cluster_memberships', collection=True),
        Relation('group_memberships', 'groupMemberships', service='group_memberships', collection=True),
    ])
    _create_fields = ('custom', 'properties')
    _update_fields = ('custom', 'properties')

    def __init__(self, service: Devices = None, custom: dict = None, properties: list = None):
        super().__init__(service=service)
        self.token: str | None = None
        self.activated: bool | None = None
        self.custom = custom
        self.properties = properties


class Devices(UpdatableResource):
    """Provides access to the Device API.

    Devices are not listed per tenant but always in the scope of a
    parent object (product, application, cluster or group).
    """

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'devices', Device)

    def list_by_cluster(self, cluster_id: str, **options) -> Tuple[List[Device], ListParams]:
        """List the devices of a cluster."""
        return self.list_by_link(self.build_parent_path('clusters', cluster_id), **options)

    def list_by_application(self, application_id: str, **options) -> Tuple[List[Device], ListParams]:
        """List the devices of an application."""
        return self.list_by_link(self.build_parent_path('applications', application_id), **options)

    def list_by_group(self, group_id: str, **options) -> Tuple[List[Device], ListParams]:
        """List the devices of a group."""
        return self.list_by_link(self.build_parent_path('groups', group_id), **options)

    def list_by_product(self, product_id: str, **options) -> Tuple[List[Device], ListParams]:
        """List the devices of a product."""
        return self.list_by_link(self.build_parent_path('products', product_id), **options)

    def create_by_product(self, product_id: str, device: Device) -> Device:
        """Create a device of a specific product.

        Args:
            product_id (str):  ID of the product
            device (Device):  Device to create

        Returns:
            A fresh Device object representing what was
            created within the database.
        """
        return self.create_by_link(self.build_parent_path('products', product_id), device)

    def create_by_link(self, href: str, device: Device) -> Device:
        """Create a device within a collection given by link."""
        return self._create_by_link(href, device)
