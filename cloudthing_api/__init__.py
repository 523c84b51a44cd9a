# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from cloudthing_api._base_api import CloudThingRestApi, CloudThingApiError, AuthenticationRequiredError
from cloudthing_api._auth import HTTPBearerAuth, Token
from cloudthing_api._main_api import CloudThingApi

__all__ = [
    'CloudThingRestApi',
    'CloudThingApi',
    'CloudThingApiError',
    'AuthenticationRequiredError',
    'HTTPBearerAuth',
    'Token',
]
