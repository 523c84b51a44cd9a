# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

import os
from unittest import mock

import pytest
import responses
from responses import matchers

from cloudthing_api.app import SimpleCloudThingApp

from tests.utils import API_URL, BASE_URL, b64encode, sample_jwt

env_basic = {
    'CT_BASEURL': BASE_URL,
    'CT_USER': 'tenant_user',
    'CT_PASSWORD': 'tenant_password',
    'CT_APPLICATION': 'app1',
}


@mock.patch.dict(os.environ, env_basic, clear=True)
def test_basic_auth_from_env():
    """Verify that the instance is authenticated with the basic
    credentials read from the environment."""
    token_json = {'token': sample_jwt(), 'type': 'Bearer', 'expiresIn': 3600}

    with responses.RequestsMock() as rsps:
        rsps.add(method=responses.POST,
                 url=API_URL + 'auth/token',
                 status=200,
                 json=token_json,
                 match=[matchers.query_param_matcher({'application': 'app1'})])
        ct = SimpleCloudThingApp()
        auth_header = rsps.calls[0].request.headers['Authorization']

    # -> credentials were read from environment
    assert auth_header == 'Basic ' + b64encode('tenant_user:tenant_password')
    # -> instance was initialized with the issued token
    assert ct.base_url == BASE_URL
    assert ct.tenant_id == 'T123'
    assert ct.get_token().token == token_json['token']

    # -> requests will be prepended with the API url
    with responses.RequestsMock() as rsps:
        rsps.add(method='GET',
                 url=API_URL + 'xyz',
                 status=200,
                 json={})
        ct.get('xyz')


@mock.patch.dict(os.environ, {'CT_BASEURL': BASE_URL, 'CT_TOKEN': sample_jwt()}, clear=True)
def test_token_auth_from_env():
    """Verify that a token given in the environment is preferred over
    basic credentials."""
    with responses.RequestsMock() as rsps:
        rsps.add(method='GET', url=API_URL, status=200, json={})
        ct = SimpleCloudThingApp()
        assert len(rsps.calls) == 1
        assert rsps.calls[0].request.headers['Authorization'] == 'Bearer ' + os.environ['CT_TOKEN']

    assert ct.is_authenticated()
    assert ct.tenant_id == 'T123'


@mock.patch.dict(os.environ, {'CT_BASEURL': BASE_URL, 'CT_USER': 'user'}, clear=True)
def test_missing_env():
    """Verify that a missing environment variable results in a ValueError
    which lists the variables found."""
    with responses.RequestsMock() as rsps:
        with pytest.raises(ValueError) as error:
            SimpleCloudThingApp()
        assert not rsps.calls

    assert 'CT_PASSWORD' in str(error.value)
    assert 'CT_BASEURL, CT_USER' in str(error.value)


@mock.patch.dict(os.environ, {}, clear=True)
def test_missing_base_url():
    """Verify that the base URL is required."""
    with pytest.raises(ValueError) as error:
        SimpleCloudThingApp()
    assert 'CT_BASEURL' in str(error.value)
    assert 'Found none' in str(error.value)
