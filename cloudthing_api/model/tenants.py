# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import UpdatableObject, UpdatableResource
from cloudthing_api.model._parser import ResourceParser, Relation


class Tenant(UpdatableObject):
    """Represent a tenant, the root of the CloudThing resource hierarchy.

    Instances of this class are returned by functions of the corresponding
    API. Only the name and custom data of a tenant can be updated.
    """
    _parser = ResourceParser({
        'short_name': 'shortName',
        'name': 'name',
        'custom': 'custom'
    }, [
        Relation('directories', service='directories', collection=True),
        Relation('applications', service='applications', collection=True),
        Relation('products', service='products', collection=True),
    ])
    _update_fields = ('name', 'custom')

    def __init__(self, service: Tenants = None, name: str = None, custom: dict = None):
        super().__init__(service=service)
        self.short_name: str | None = None
        self.name = name
        self.custom = custom


class Tenants(UpdatableResource):
    """Provides access to the Tenant API.

    A client is always bound to a single tenant, the one its token was
    issued for.
    """

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'tenants', Tenant)

    def get(self, **options) -> Tenant:
        """Retrieve the current tenant.

        The tenant is addressed by the ID derived from the session token,
        or as `tenants/current` if it is not known.

        Args:
            options:  Expansion options (`expand`)

        Returns:
            A Tenant instance.
        """
        path = self.build_object_path(self.ct.tenant_id or 'current')
        return self.hydrate(self._get_redirected(path, **options))
