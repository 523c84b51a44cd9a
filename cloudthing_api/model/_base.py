# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Tuple, Type
from urllib.parse import quote

from cloudthing_api._base_api import CloudThingRestApi, CloudThingApiError, AuthenticationRequiredError
from cloudthing_api.model._parser import ResourceParser
from cloudthing_api.model._util import _DateUtil


@dataclass
class ListParams:
    """Pagination envelope of a collection response."""
    href: str = ''
    size: int = 0
    limit: int = 0
    page: int = 0
    prev: str | None = None
    next: str | None = None

    @classmethod
    def from_json(cls, json: dict) -> ListParams:
        # pylint: disable=missing-function-docstring
        def link(key):
            value = json.get(key)
            return value.get('href') if isinstance(value, dict) else None

        return ListParams(href=json.get('href', ''), size=json.get('size', 0),
                          limit=json.get('limit', 0), page=json.get('page', 0),
                          prev=link('prev'), next=link('next'))


class PartialCollectionError(ValueError):
    """Raised when some items of a collection could not be hydrated.

    The error carries the successfully hydrated items (in order) as well
    as the errors per failed item index.
    """

    def __init__(self, items: List[Any], errors: Dict[int, Exception], list_params: ListParams = None):
        indexes = ', '.join(str(i) for i in errors)
        super().__init__(f"Unable to parse collection items: {indexes}")
        self.items = items
        self.errors = errors
        self.list_params = list_params


class CloudThingObject:
    """Base class for all CloudThing database objects.

    Each object holds the common fields `href`, `created_at` and
    `updated_at`, its kind specific fields and a set of named relations.
    A relation is either just a link (unexpanded) or a hydrated object
    (or list of objects) if it was expanded by the server. Use the `link`
    function to inspect the state of a relation.
    """

    _parser = ResourceParser({})
    _create_fields = ()
    _create_links = ()

    def __init__(self, service: CloudThingResource = None):
        self.service = service
        self.href: str | None = None
        self.created_at: str | None = None
        self.updated_at: str | None = None
        self._links: Dict[str, str] = {}
        for relation in self._parser.relations:
            self.__dict__[relation.name] = None
            self._links[relation.name] = ''

    def __repr__(self):
        return f'{type(self).__name__}(href={self.href!r})'

    def _assert_service(self):
        if not self.service:
            raise ValueError("Service reference must be set to allow direct database access.")

    def _assert_href(self):
        if not self.href:
            raise ValueError("The object href must be set to allow direct object access.")

    @classmethod
    def _to_datetime(cls, timestring):
        if timestring:
            return _DateUtil.to_datetime(timestring)
        return None

    @property
    def creation_datetime(self) -> datetime | None:
        """Creation time as datetime object."""
        return self._to_datetime(self.created_at)

    @property
    def updated_datetime(self) -> datetime | None:
        """Last update time as datetime object."""
        return self._to_datetime(self.updated_at)

    @classmethod
    def from_json(cls, json: dict, service: CloudThingResource = None) -> Any[CloudThingObject]:
        """Create an object instance from CloudThing JSON format.

        Expanded relations are hydrated using the services of the client
        the given service belongs to.

        Params:
            json (dict): The JSON to parse.
            service (CloudThingResource): Originating service

        Returns:
            A CloudThingObject instance.

        Raises:
            ValueError if the JSON is malformed.
        """
        obj = cls(service=service)
        return cls._parser.from_json(json, obj, service.ct if service else None)

    def to_create_json(self) -> dict:
        """Create a representation of this object as expected by the
        API on object creation."""
        return self._parser.to_json(self, self._create_fields, self._create_links)

    def get_id(self) -> str | None:
        """Read the ID of this object (the last segment of its href)."""
        if not self.href:
            return None
        return self.href.split('/')[-1]

    def link(self, name: str) -> Tuple[bool, str]:
        """Inspect a relation of this object.

        Args:
            name (str):  Name of the relation, e.g. 'directory'

        Returns:
            A tuple (expanded, href) telling whether the related object
            was hydrated and the link to it ('' if the relation does not
            apply).

        Raises:
            ValueError if there is no such relation.
        """
        self._parser.relation(name)
        target = self.__dict__.get(name)
        href = self._links.get(name) or (target.href if isinstance(target, CloudThingObject) else '')
        return target is not None, href or ''

    def set_link(self, name: str, target: str | CloudThingObject | None):
        """Set a relation of this object.

        Args:
            name (str):  Name of the relation
            target (str|CloudThingObject):  Link or object to refer to;
                None to unset the relation
        """
        self._parser.relation(name)
        if isinstance(target, CloudThingObject):
            self.__dict__[name] = target
            self._links[name] = target.href or ''
        else:
            self.__dict__[name] = None
            self._links[name] = target or ''

    def delete(self):
        """Delete this object within the database."""
        self._assert_service()
        self._assert_href()
        self.service.delete_by_link(self.href)


class UpdatableObject(CloudThingObject):
    """Base class for CloudThing objects which can be updated."""

    _update_fields = ()
    _update_links = ()

    def to_update_json(self) -> dict:
        """Create a representation of this object as expected by the
        API on object update."""
        return self._parser.to_json(self, self._update_fields, self._update_links)

    def save(self) -> Any[UpdatableObject]:
        """Update this object within the database.

        The object is updated in place with the database state. Already
        hydrated relations are preserved.

        Returns:
            This object instance.
        """
        self._assert_service()
        self._assert_href()
        result = self.service.update_by_link(self.href, self)
        self._merge(result)
        return self

    def _merge(self, other: CloudThingObject):
        relations = {r.name for r in self._parser.relations}
        for name, value in other.__dict__.items():
            if name not in relations and name not in ('service', '_links'):
                self.__dict__[name] = value
        for name in relations:
            if other.__dict__.get(name) is not None:
                self.__dict__[name] = other.__dict__[name]
            if other._links.get(name):  # pylint: disable=protected-access
                self._links[name] = other._links[name]  # pylint: disable=protected-access


class ResourceOwner:
    """Mixin for objects owning telemetry resources (data, events and
    commands)."""

    href: str | None

    def resources_link(self) -> str:
        """Link to the telemetry resources of this object."""
        if not self.href:
            raise ValueError("The object href must be set to access its resources.")
        return self.href.rstrip('/') + '/resources'

    def resources_data_link(self, key: str = None) -> str:
        """Link to the data series of this object (or a single key)."""
        return self._resources_link('data', key)

    def resources_events_link(self, key: str = None) -> str:
        """Link to the event series of this object (or a single key)."""
        return self._resources_link('events', key)

    def resources_commands_link(self, key: str = None) -> str:
        """Link to the command series of this object (or a single key)."""
        return self._resources_link('commands', key)

    def _resources_link(self, kind: str, key: str = None) -> str:
        link = f'{self.resources_link()}/{kind}'
        return f"{link}/{quote(key, safe='')}" if key else link


class CloudThingResource:
    """Abstract base class for all CloudThing API resources.

    A resource provides get, list, create and delete functionality for a
    specific object kind. It also hydrates JSON payloads into objects,
    see `hydrate` and `hydrate_collection`.
    """

    _log = logging.getLogger(__name__)

    def __init__(self, ct: CloudThingRestApi, resource: str, object_class: Type[CloudThingObject]):
        self.ct = ct
        self.resource = resource.strip('/')
        self.object_class = object_class

    def build_object_path(self, object_id: str) -> str:
        """Build the path to a specific object of this resource.

        Args:
            object_id (str):  ID of the object

        Returns:
            The path to the object, relative to the API base.
        """
        return f'{self.resource}/{object_id}'

    def build_tenant_path(self) -> str:
        """Build the path to this resource's collection of the current
        tenant, e.g. `tenants/T123/applications`."""
        tenant_id = self.ct.tenant_id
        if not tenant_id:
            raise AuthenticationRequiredError("Unable to resolve tenant. Not authenticated.")
        return f'tenants/{tenant_id}/{self.resource}'

    def build_parent_path(self, parent: str, parent_id: str, collection: str = None) -> str:
        """Build the path to a parent-scoped collection, e.g.
        `applications/abc/clusters`.

        Args:
            parent (str):  Collection name of the parent
            parent_id (str):  ID of the parent object
            collection (str):  Name of the nested collection, defaults to
                this resource's name
        """
        return f'{parent}/{parent_id}/{collection or self.resource}'

    def hydrate(self, json: dict) -> Any[CloudThingObject]:
        """Hydrate an object from its JSON representation.

        This does not perform any request; expanded relations are resolved
        from the data embedded within the JSON.

        Raises:
            ValueError if the JSON is malformed.
        """
        return self.object_class.from_json(json, service=self)

    def hydrate_collection(self, json: dict) -> Tuple[List[Any[CloudThingObject]], ListParams]:
        """Hydrate all items of a collection from its JSON representation.

        Returns:
            A tuple of the hydrated items (in order) and the collection's
            pagination information.

        Raises:
            ValueError if the collection itself is malformed.
            PartialCollectionError if at least one of the items could not
                be hydrated.
        """
        if not isinstance(json, dict):
            raise ValueError(f"Unexpected collection format. Expected an object, got: {type(json).__name__}")
        list_params = ListParams.from_json(json)
        items_json = json.get('items') or []
        if not isinstance(items_json, list):
            raise ValueError(f"Unexpected collection items format. Expected a list, got: {type(items_json).__name__}")
        items = []
        errors = {}
        for i, item_json in enumerate(items_json):
            try:
                items.append(self.hydrate(item_json))
            except ValueError as e:
                self._log.warning("Unable to parse item %d of collection %s: %s", i, list_params.href, e)
                errors[i] = e
        if errors:
            raise PartialCollectionError(items, errors, list_params)
        return items, list_params

    def get_by_id(self, object_id: str, **options) -> Any[CloudThingObject]:
        """Retrieve a specific object from the database.

        Args:
            object_id (str):  The ID of the object
            options:  Expansion and pagination options (`expand`,
                `limit`, `page`)

        Returns:
            The hydrated object.
        """
        return self.get_by_link(self.build_object_path(object_id), **options)

    def get_by_link(self, href: str, **options) -> Any[CloudThingObject]:
        """Retrieve a specific object from the database by its link.

        See also `get_by_id`.
        """
        return self.hydrate(self.ct.get(href, **options))

    def list_by_link(self, href: str, **options) -> Tuple[List[Any[CloudThingObject]], ListParams]:
        """Retrieve a collection of objects from the database.

        Args:
            href (str):  Link to the collection
            options:  Expansion and pagination options (`expand`,
                `limit`, `page`)

        Returns:
            A tuple of the hydrated objects and the collection's pagination
            information.
        """
        return self.hydrate_collection(self.ct.get(href, **options))

    def _get_redirected(self, href: str, **options) -> dict:
        """GET a resource which may be served via redirect.

        Redirects to another host drop the Authorization header, so a
        401/403 after a redirect is retried once at the final URL.
        """
        r = self.ct.request('GET', href, **options)
        if r.status_code in (401, 403) and r.history:
            self._log.debug("Request redirected to %s, retrying with authorization.", r.url)
            r = self.ct.request('GET', r.url)
        if r.status_code != 200:
            raise CloudThingApiError.from_response(r)
        return r.json()

    def _create_by_link(self, href: str, obj: CloudThingObject) -> Any[CloudThingObject]:
        return self.hydrate(self.ct.post(href, obj.to_create_json(), expected=201))

    def delete(self, obj: CloudThingObject):
        """Delete an object within the database."""
        obj._assert_href()  # pylint: disable=protected-access
        self.delete_by_link(obj.href)

    def delete_by_id(self, object_id: str):
        """Delete an object within the database by its ID."""
        self.delete_by_link(self.build_object_path(object_id))

    def delete_by_link(self, href: str):
        """Delete an object within the database by its link."""
        self.ct.delete(href)


class UpdatableResource(CloudThingResource):
    """Abstract base class for CloudThing API resources which allow
    updates of their objects."""

    def update_by_id(self, object_id: str, obj: UpdatableObject) -> Any[UpdatableObject]:
        """Update an object within the database by its ID.

        Returns:
            A fresh object representing the updated database state.
        """
        return self.update_by_link(self.build_object_path(object_id), obj)

    def update_by_link(self, href: str, obj: UpdatableObject) -> Any[UpdatableObject]:
        """Update an object within the database by its link.

        Only the updatable fields of the object are sent.

        Returns:
            A fresh object representing the updated database state.
        """
        return self.hydrate(self.ct.post(href, obj.to_update_json(), expected=200))
