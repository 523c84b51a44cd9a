# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from deprecated import deprecated

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import UpdatableObject, UpdatableResource, ResourceOwner
from cloudthing_api.model._parser import ResourceParser, Relation


class Group(UpdatableObject, ResourceOwner):
    """Represent a device group within CloudThing."""
    _parser = ResourceParser({
        'name': 'name',
        'description': 'description',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('application', service='applications'),
        Relation('cluster', service='clusters'),
        Relation('devices', service='devices', collection=True),
    ])
    _create_fields = ('name', 'description', 'custom')
    _update_fields = ('name', 'description', 'custom')

    def __init__(self, service: Groups = None, name: str = None, description: str = None, custom: dict = None):
        super().__init__(service=service)
        self.name = name
        self.description = description
        self.custom = custom


class Groups(UpdatableResource):
    """Provides access to the Group API.

    Groups are listed via the links of their parent objects, e.g.
    `cluster.link('groups')`.
    """

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'groups', Group)

    def create(self, group: Group) -> Group:
        """Create a group.

        Returns:
            A fresh Group object representing what was
            created within the database.
        """
        return self._create_by_link(self.resource, group)

    @deprecated(reason="Use Groups.update_by_link or Group.save instead.")
    def update(self, group: Group) -> Group:
        # pylint: disable=missing-function-docstring
        group._assert_href()  # pylint: disable=protected-access
        return self.update_by_link(group.href, group)
