# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

from datetime import datetime
from typing import List, Tuple

from cloudthing_api._base_api import CloudThingRestApi
from cloudthing_api.model._base import UpdatableObject, UpdatableResource, ListParams
from cloudthing_api.model._parser import ResourceParser, Relation


class User(UpdatableObject):
    """Represent a user within a CloudThing directory.

    The `password` and `activated` fields are write-only, they are sent
    on creation and update but never returned by the API.
    """
    _parser = ResourceParser({
        'username': 'username',
        'email': 'email',
        'first_name': 'firstName',
        'surname': 'surname',
        'password': 'password',
        'activated': 'activated',
        'last_successful_login': 'lastSuccessfulLogin',
        'last_failed_login': 'lastFailedLogin',
        'activation_code': 'activationCode',
        'custom': 'custom'
    }, [
        Relation('tenant', service='tenant'),
        Relation('applications', service='applications', collection=True),
        Relation('directory', service='directories'),
        Relation('usergroups', service='usergroups', collection=True),
        Relation('memberships', service='memberships', collection=True),
    ])
    _create_fields = ('username', 'email', 'first_name', 'surname', 'password', 'activated', 'custom')
    _update_fields = ('username', 'email', 'first_name', 'surname', 'password', 'activated', 'custom')

    def __init__(self, service: Users = None, username: str = None, email: str = None,
                 first_name: str = None, surname: str = None, password: str = None,
                 activated: bool = None, custom: dict = None):
        """Create a new User object.

        Args:
            service (Users):  Service reference; needs to be set for
                direct manipulation (save, delete)
            username (str):  The user's login name
            email (str):  The user's email address
            first_name (str):  The user's first name
            surname (str):  The user's surname
            password (str):  The user's password (write-only)
            activated (bool):  Whether the user is activated (write-only)
            custom (dict):  Custom data
        """
        super().__init__(service=service)
        self.username = username
        self.email = email
        self.first_name = first_name
        self.surname = surname
        self.password = password
        self.activated = activated
        self.last_successful_login: str | None = None
        self.last_failed_login: str | None = None
        self.activation_code: str | None = None
        self.custom = custom

    @property
    def last_successful_login_datetime(self) -> datetime | None:
        """Time of the last successful login as datetime object."""
        return self._to_datetime(self.last_successful_login)

    @property
    def last_failed_login_datetime(self) -> datetime | None:
        """Time of the last failed login as datetime object."""
        return self._to_datetime(self.last_failed_login)


class Users(UpdatableResource):
    """Provides access to the User API."""

    def __init__(self, ct: CloudThingRestApi):
        super().__init__(ct, 'users', User)

    def get_current(self, **options) -> User:
        """Retrieve the user the session belongs to."""
        return self.hydrate(self._get_redirected(self.build_object_path('current'), **options))

    def list_by_directory(self, directory_id: str, **options) -> Tuple[List[User], ListParams]:
        """List the users of a directory."""
        return self.list_by_link(self.build_parent_path('directories', directory_id), **options)

    def list_by_usergroup(self, usergroup_id: str, **options) -> Tuple[List[User], ListParams]:
        """List the users of a usergroup."""
        return self.list_by_link(self.build_parent_path('usergroups', usergroup_id), **options)

    def create_by_directory(self, directory_id: str, user: User) -> User:
        """Create a user within a directory.

        Returns:
            A fresh User object representing what was
            created within the database.
        """
        return self.create_by_link(self.build_parent_path('directories', directory_id), user)

    def create_by_link(self, href: str, user: User) -> User:
        """Create a user within a collection given by link."""
        return self._create_by_link(href, user)
