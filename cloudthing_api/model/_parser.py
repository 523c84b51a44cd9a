# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from typing import Any, Dict, Iterable


class Relation:
    """Definition of a relation between CloudThing objects.

    Args:
        name (str):  Attribute name of the relation within the object
        key (str):  JSON key of the relation
        service (str):  Name of the client attribute providing the target
            service, e.g. 'directories'
        collection (bool):  Whether the relation refers to a collection
        link_only (bool):  Whether the relation is never hydrated
    """

    def __init__(self, name: str, key: str = None, service: str = None,
                 collection: bool = False, link_only: bool = False):
        self.name = name
        self.key = key or name
        self.service = service
        self.collection = collection
        self.link_only = link_only


class ResourceParser(object):
    """A parser for CloudThing resource objects.

    The parser converts between an object and a JSON representation using
    a simple field mapping dictionary for scalar fields and a relation
    table for related objects.

    Relations are represented as maps within the JSON. A map holding just
    an `href` is a link to an unexpanded object, a map with more entries
    was expanded by the server and is hydrated using the target service.
    Hydration never performs additional requests.
    """

    SERVER_FIELDS = {'href': 'href', 'created_at': 'createdAt', 'updated_at': 'updatedAt'}

    def __init__(self, mapping: Dict[str, str], relations: Iterable[Relation] = ()):
        self._obj_to_json = {**mapping, **self.SERVER_FIELDS}
        self._json_to_object = {v: k for k, v in self._obj_to_json.items()}
        self._relations = {r.name: r for r in relations}

    @property
    def relations(self) -> Iterable[Relation]:
        """All relations of the parsed object type."""
        return self._relations.values()

    def relation(self, name: str) -> Relation:
        """Find a relation by name.

        Raises:
            ValueError if there is no such relation.
        """
        try:
            return self._relations[name]
        except KeyError:
            raise ValueError(f"Unknown relation: '{name}'") from None

    def from_json(self, obj_json: dict, new_obj: Any, ct: Any = None) -> Any:
        """Update a given object instance with data from a JSON object.

        Params:
            obj_json (dict): JSON object (nested dict) to parse
            new_obj (Any):  object instance to update (usually newly created)
            ct (CloudThingApi):  client instance providing the services to
                hydrate expanded relations

        Returns:
            The updated object instance.

        Raises:
            ValueError if the JSON or one of its relations is malformed.
        """
        if not isinstance(obj_json, dict):
            raise ValueError(f"Unexpected JSON format. Expected an object, got: {type(obj_json).__name__}")
        for json_key, field_name in self._json_to_object.items():
            if json_key in obj_json:
                new_obj.__dict__[field_name] = obj_json[json_key]
        for relation in self._relations.values():
            self._parse_relation(relation, obj_json.get(relation.key), new_obj, ct)
        return new_obj

    def to_json(self, obj: Any, include: Iterable[str], links: Iterable[str] = ()) -> dict:
        """Build a JSON representation of an object.

        Server assigned fields (href and timestamps) are never included.

        Params:
            obj (Any):  the object to format as JSON
            include (Iterable):  object fields to include; fields without
                value are omitted
            links (Iterable):  names of relations to include as links

        Returns:
            A JSON representation (nested dict) of the object.
        """
        obj_json = {}
        for name in include:
            if name in self.SERVER_FIELDS or name not in self._obj_to_json:
                continue
            value = obj.__dict__.get(name)
            if value is not None:
                obj_json[self._obj_to_json[name]] = value
        for name in links:
            href = obj.link(name)[1]
            if href:
                obj_json[self.relation(name).key] = {'href': href}
        return obj_json

    @staticmethod
    def _parse_relation(relation: Relation, value: Any, obj: Any, ct: Any):
        obj.__dict__[relation.name] = None
        obj._links[relation.name] = ''  # pylint: disable=protected-access
        if value is None:
            return
        if not isinstance(value, dict):
            raise ValueError(f"Unexpected format of relation '{relation.key}'. "
                             f"Expected an object, got: {type(value).__name__}")
        obj._links[relation.name] = value.get('href', '')  # pylint: disable=protected-access
        if len(value) <= 1 or relation.link_only:
            return
        if ct is None:
            raise ValueError(f"Unable to hydrate expanded relation '{relation.key}'. "
                             "CloudThing connection reference must be set.")
        service = getattr(ct, relation.service)
        if relation.collection:
            obj.__dict__[relation.name] = service.hydrate_collection(value)[0]
        else:
            obj.__dict__[relation.name] = service.hydrate(value)
