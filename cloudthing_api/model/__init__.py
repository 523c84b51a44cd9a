# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from cloudthing_api._base_api import Pagination
from cloudthing_api.model._base import *
from cloudthing_api.model.apikeys import *
from cloudthing_api.model.applications import *
from cloudthing_api.model.clusters import *
from cloudthing_api.model.devices import *
from cloudthing_api.model.directories import *
from cloudthing_api.model.exports import *
from cloudthing_api.model.groups import *
from cloudthing_api.model.memberships import *
from cloudthing_api.model.products import *
from cloudthing_api.model.resources import *
from cloudthing_api.model.tenants import *
from cloudthing_api.model.usergroups import *
from cloudthing_api.model.users import *


__all__ = [
    # API Classes
    'Tenants',
    'Directories',
    'Applications',
    'Products',
    'Devices',
    'Clusters',
    'Groups',
    'Users',
    'Usergroups',
    'Memberships',
    'ClusterMemberships',
    'GroupMemberships',
    'Apikeys',
    'Exports',
    'Resources',
    # Model Classes
    'Tenant',
    'Directory',
    'Application',
    'Product',
    'Device',
    'Cluster',
    'Group',
    'User',
    'Usergroup',
    'Membership',
    'ClusterMembership',
    'GroupMembership',
    'Apikey',
    'Export',
    'DataPoint',
    'EventPoint',
    'CommandPoint',
    # Common
    'ListParams',
    'Pagination',
    'PartialCollectionError',
]
