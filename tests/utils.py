# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

# pylint: disable=protected-access

from __future__ import annotations

import base64
import json
import os
import time
from typing import Any

import jwt

from cloudthing_api import CloudThingApi, Token


BASE_URL = 'https://tenant.cloudthing.io'
API_URL = BASE_URL + '/api/v1/'
TENANT_ID = 'T123'

# HMAC keys should not be shorter than the hash output
SIGNING_KEY = 'a-signing-key-which-is-long-enough-for-hs256'


def b64encode(auth_string: str) -> str:
    """Encode a string with base64. This uses UTF-8 encoding."""
    return base64.b64encode(auth_string.encode('utf-8')).decode('utf-8')


def sample_jwt(**kwargs) -> str:
    """Create a test JWT token (as string). Additional claims can be
    specified via `kwargs`, claims given as None are removed."""
    now = int(time.time())
    payload = {
        'iss': f'{API_URL}tenants/{TENANT_ID}',
        'sub': 'someone@example.com',
        'iat': now,
        'exp': now + 3600}
    payload.update(**kwargs)
    payload = {k: v for k, v in payload.items() if v is not None}
    return jwt.encode(payload, key=SIGNING_KEY, algorithm='HS256')


def sample_token(**kwargs) -> Token:
    """Create a test Token. See `sample_jwt` for the arguments."""
    return Token(token=sample_jwt(**kwargs), type='Bearer', expires_in=3600)


def build_api() -> CloudThingApi:
    """Create an authenticated CloudThingApi instance without sending
    any request."""
    ct = CloudThingApi(BASE_URL)
    ct._auth_state.commit(sample_token())
    return ct


def request_json(call) -> Any:
    """Read the JSON body of a recorded request."""
    return json.loads(call.request.body)


def read_json(name: str) -> dict:
    """Read a JSON file located in the tests/model directory."""
    path = os.path.join(os.path.dirname(__file__), 'model', name)
    with open(path, encoding='utf-8', mode='rt') as f:
        return json.load(f)


def href(path: str) -> str:
    """Build the absolute link to an API resource."""
    return API_URL + path
