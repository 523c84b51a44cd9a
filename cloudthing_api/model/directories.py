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


class Directory(UpdatableObject):
    """Represent a user directory within CloudThing.

    A directory groups users and usergroups and can be assigned to
    applications.
    """
    _parser = ResourceParser({
        'name': 'name',
        'description': 'description',
        'official': 'official',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('applications', service='applications', collection=True),
        Relation('users', service='users', collection=True),
        Relation('usergroups', service='usergroups', collection=True),
    ])
    _create_fields = ('name', 'description', 'custom')
    _update_fields = ('name', 'description', 'custom')

    def __init__(self, service: Directories = None, name: str = None,
                 description: str = None, custom: dict = None):
        """Create a new Directory object.

        Args:
            service (Directories):  Service reference; needs to be set for
                direct manipulation (save, delete)
            name (str):  Name of the directory
            description (str):  Description text
            custom (dict):  Custom data
        """
        super().__init__(service=service)
        self.name = name
        self.description = description
        self.official: bool | None = None
        self.custom = custom


class Directories(UpdatableResource):
    """Provides access to the Directory API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'directories', Directory)

    def list(self, **options) -> Tuple[List[Directory], ListParams]:
        """List the directories of the current tenant.

        Args:
            options:  Expansion and pagination options (`expand`,
                `limit`, `page`)
        """
        return self.list_by_link(self.build_tenant_path(), **options)

    def create(self, directory: Directory) -> Directory:
        """Create a directory within the current tenant.

        Returns:
            A fresh Directory object representing what was
            created within the database.
        """
        return self._create_by_link(self.build_tenant_path(), directory)
