# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

import requests

from cloudthing_api._base_api import CloudThingRestApi

from cloudthing_api.model.apikeys import Apikeys
from cloudthing_api.model.applications import Applications
from cloudthing_api.model.clusters import Clusters
from cloudthing_api.model.devices import Devices
from cloudthing_api.model.directories import Directories
from cloudthing_api.model.exports import Exports
from cloudthing_api.model.groups import Groups
from cloudthing_api.model.memberships import Memberships, ClusterMemberships, GroupMemberships
from cloudthing_api.model.products import Products
from cloudthing_api.model.resources import Resources
from cloudthing_api.model.tenants import Tenants
from cloudthing_api.model.usergroups import Usergroups
from cloudthing_api.model.users import Users


class CloudThingApi(CloudThingRestApi):
    """Main CloudThing API.

    Provides usage centric access to a CloudThing instance.
    """

    def __init__(self, base_url: str, session: requests.Session = None,
                 user_agent: str = None, timeout: float = None):
        super().__init__(base_url, session=session, user_agent=user_agent, timeout=timeout)
        self.__tenant = Tenants(self)
        self.__directories = Directories(self)
        self.__applications = Applications(self)
        self.__products = Products(self)
        self.__devices = Devices(self)
        self.__clusters = Clusters(self)
        self.__groups = Groups(self)
        self.__users = Users(self)
        self.__usergroups = Usergroups(self)
        self.__memberships = Memberships(self)
        self.__cluster_memberships = ClusterMemberships(self)
        self.__group_memberships = GroupMemberships(self)
        self.__apikeys = Apikeys(self)
        self.__exports = Exports(self)
        self.__resources = Resources(self)

    @property
    def tenant(self) -> Tenants:
        """Provide access to the Tenant API."""
        return self.__tenant

    @property
    def directories(self) -> Directories:
        """Provide access to the Directory API."""
        return self.__directories

    @property
    def applications(self) -> Applications:
        """Provide access to the Application API."""
        return self.__applications

    @property
    def products(self) -> Products:
        """Provide access to the Product API."""
        return self.__products

    @property
    def devices(self) -> Devices:
        """Provide access to the Device API."""
        return self.__devices

    @property
    def clusters(self) -> Clusters:
        """Provide access to the Cluster API."""
        return self.__clusters

    @property
    def groups(self) -> Groups:
        """Provide access to the Group API."""
        return self.__groups

    @property
    def users(self) -> Users:
        """Provide access to the User API."""
        return self.__users

    @property
    def usergroups(self) -> Usergroups:
        """Provide access to the Usergroup API."""
        return self.__usergroups

    @property
    def memberships(self) -> Memberships:
        """Provide access to the (user) Membership API."""
        return self.__memberships

    @property
    def cluster_memberships(self) -> ClusterMemberships:
        """Provide access to the Cluster Membership API."""
        return self.__cluster_memberships

    @property
    def group_memberships(self) -> GroupMemberships:
        """Provide access to the Group Membership API."""
        return self.__group_memberships

    @property
    def apikeys(self) -> Apikeys:
        """Provide access to the API key API."""
        return self.__apikeys

    @property
    def exports(self) -> Exports:
        """Provide access to the Export API."""
        return self.__exports

    @property
    def resources(self) -> Resources:
        """Provide access to the telemetry (data, events, commands) API."""
        return self.__resources
