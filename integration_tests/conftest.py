# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

# pylint: disable=redefined-outer-name

import logging
import os
import uuid

from dotenv import load_dotenv
import pytest

from cloudthing_api import CloudThingApi
from cloudthing_api._util import ct_keys
from cloudthing_api.app import SimpleCloudThingApp


@pytest.fixture(scope='session')
def logger():
    """Provide a logger for testing."""
    return logging.getLogger('cloudthing_api.test')


@pytest.fixture(scope='session')
def test_environment(logger):
    """Prepare the environment, i.e. read a .env file if found."""

    # check if there is a .env file
    if os.path.exists('.env'):
        logger.info("Environment file (.env) exists and will be considered.")
        # check if any CT_ variable is already defined
        predefined_keys = ct_keys()
        if predefined_keys:
            logger.warning("The following environment variables are already defined and may be overridden: %s",
                           ', '.join(sorted(predefined_keys)))
        load_dotenv()
    logger.info("Found the following keys: %s.", ', '.join(sorted(ct_keys())))


@pytest.fixture(scope='session')
def live_ct(test_environment) -> CloudThingApi:
    """Provide a live CloudThingApi instance as defined by the environment."""
    if 'CT_BASEURL' not in os.environ.keys():
        pytest.skip("Missing CloudThing environment variables (CT_*). Cannot create CloudThingApi instance. "
                    "Please define the required variables directly or setup a .env file.")
    return SimpleCloudThingApp()


@pytest.fixture(scope='function')
def random_name() -> str:
    """Provide a random name for test objects."""
    return f'test-{uuid.uuid4().hex[:12]}'
