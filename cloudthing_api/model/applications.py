# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import List, Tuple

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import CloudThingObject, UpdatableObject, UpdatableResource, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class Application(UpdatableObject):
    """Represent an instance of an application object in CloudThing.

    Instances of this class are returned by functions of the corresponding
    API. Use this class to create new or update objects.

    The directory of an application can only be set on creation.
    """
    _parser = ResourceParser({
        'name': 'name',
        'official': 'official',
        'description': 'description',
        'status': 'status',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('directory', service='directories'),
        Relation('devices', service='devices', collection=True),
        Relation('clusters', service='clusters', collection=True),
    ])
    _create_fields = ('name', 'description', 'status', 'custom')
    _create_links = ('directory',)
    _update_fields = ('name', 'description', 'status', 'custom')

    def __init__(self, service: Applications = None, name: str = None, description: str = None,
                 status: str = None, custom: dict = None, directory: str | CloudThingObject = None):
        """Create a new Application object.

        Args:
            service (Applications):  Service reference; needs to be set for
                direct manipulation (save, delete)
            name (str):  Name of the application
            description (str):  Description text
            status (str):  Application status
            custom (dict):  Custom data
            directory (str|Directory):  Directory (or its link) to assign
                on creation
        """
        super().__init__(service=service)
        self.name = name
        self.official: bool | None = None
        self.description = description
        self.status = status
        self.custom = custom
        if directory:
            self.set_link('directory', directory)


class Applications(UpdatableResource):
    """Provides access to the Application API.

    This class can be used for get, list, create, update and
    delete applications within the current tenant.
    """

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'applications', Application)

    def list(self, **options) -> Tuple[List[Application], ListParams]:
        """List the applications of the current tenant.

        Args:
            options:  Expansion and pagination options (`expand`,
                `limit`, `page`)
        """
        return self.list_by_link(self.build_tenant_path(), **options)

    def create(self, application: Application) -> Application:
        """Create an application within the current tenant.

        Returns:
            A fresh Application object representing what was
            created within the database.
        """
        return self._create_by_link(self.build_tenant_path(), application)
