# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import List, Tuple

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import UpdatableObject, UpdatableResource, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class Product(UpdatableObject):
    """Represent a product, i.e. a device model within CloudThing.

    The `properties` are a list of key/value dictionaries, e.g.
    `[{'key': 'vendor', 'value': 'ACME'}]`. The `resources` describe the
    data, events and commands the devices of this product provide:
    :: python
        {'data': [{'id': 'temp', 'name': 'Temperature', 'description': ''}],
         'events': [],
         'commands': [{'id': 'reboot', 'name': 'Reboot', 'description': '',
                       'payloads': [{'name': 'delay', 'serialization': 'json', 'value': 0}]}]}
    """
    _parser = ResourceParser({
        'name': 'name',
        'description': 'description',
        'custom': 'custom',
        'properties': 'properties',
        'resources': 'resources'
    }, [
        Relation('tenant', service='tenant'),
        Relation('devices', service='devices', collection=True),
    ])
    _create_fields = ('name', 'description', 'custom', 'properties', 'resources')
    _update_fields = ('name', 'description', 'custom', 'properties', 'resources')

    def __init__(self, service: Products = None, name: str = None, description: str = None,
                 custom: dict = None, properties: list = None, resources: dict = None):
        super().__init__(service=service)
        self.name = name
        self.description = description
        self.custom = custom
        self.properties = properties
        self.resources = resources

    def get_property(self, key: str, default=None):
        """Read the value of a product property by its key."""
        for p in self.properties or []:
            if p.get('key') == key:
                return p.get('value')
        return default


class Products(UpdatableResource):
    """Provides access to the Product API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'products', Product)

    def list(self, **options) -> Tuple[List[Product], ListParams]:
        """List the products of the current tenant."""
        return self.list_by_link(self.build_tenant_path(), **options)

    def create(self, product: Product) -> Product:
        """Create a product within the current tenant."""
        return self._create_by_link(self.build_tenant_path(), product)
