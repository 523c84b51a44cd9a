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


class Usergroup(UpdatableObject):
    """Represent a group of users within a directory."""
    _parser = ResourceParser({
        'name': 'name',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('directory', service='directories'),
        Relation('users', service='users', collection=True),
        Relation('memberships', service='memberships', collection=True),
    ])
    _create_fields = ('name', 'custom')
    _update_fields = ('name', 'custom')

    def __init__(self, service: Usergroups = None, name: str = None, custom: dict = None):
        super().__init__(service=service)
        self.name = name
        self.custom = custom


class Usergroups(UpdatableResource):
    """Provides access to the Usergroup API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'usergroups', Usergroup)

    def list_by_directory(self, directory_id: str, **options) -> Tuple[List[Usergroup], ListParams]:
        """List the usergroups of a directory."""
        return self.list_by_link(self.build_parent_path('directories', directory_id), **options)

    def create_by_directory(self, directory_id: str, usergroup: Usergroup) -> Usergroup:
        """Create a usergroup within a directory."""
        return self.create_by_link(self.build_parent_path('directories', directory_id), usergroup)

    def create_by_link(self, href: str, usergroup: Usergroup) -> Usergroup:
        """Create a usergroup within a collection given by link."""
        return self._create_by_link(href, usergroup)
