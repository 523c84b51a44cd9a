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


class Apikey(UpdatableObject):
    """Represent an API key of a tenant.

    The key and secret are generated by the server and returned on
    creation.
    """
    _parser = ResourceParser({
        'name': 'name',
        'description': 'description',
        'key': 'key',
        'secret': 'secret',
        'status': 'status',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('applications', service='applications', collection=True),
    ])
    _create_fields = ('name', 'description', 'status', 'custom')
    _update_fields = ('name', 'description', 'status', 'custom')

    ENABLED_STATUS = 'ENABLED'
    DISABLED_STATUS = 'DISABLED'

    def __init__(self, service: Apikeys = None, name: str = None, description: str = None,
                 status: str = None, custom: dict = None):
        super().__init__(service=service)
        self.name = name
        self.description = description
        self.key: str | None = None
        self.secret: str | None = None
        self.status = status
        self.custom = custom


class Apikeys(UpdatableResource):
    """Provides access to the API key API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'apikeys', Apikey)

    def list(self, **options) -> Tuple[List[Apikey], ListParams]:
        """List the API keys of the current tenant."""
        return self.list_by_link(self.build_tenant_path(), **options)

    def create(self, apikey: Apikey) -> Apikey:
        """Create an API key within the current tenant."""
        return self._create_by_link(self.build_tenant_path(), apikey)
