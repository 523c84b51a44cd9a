# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

import logging
import os

import requests

from cloudthing_api._main_api import CloudThingApi
from cloudthing_api._util import ct_keys


class SimpleCloudThingApp(CloudThingApi):
    """Application-like CloudThing API.

    The SimpleCloudThingApp class evaluates the environment to resolve
    the connection and authentication information automatically:

    - CT_BASEURL:  The CloudThing base URL (required)
    - CT_TOKEN:  A previously issued token; if defined, it is used
      instead of basic credentials
    - CT_USER, CT_PASSWORD:  Basic credentials
    - CT_APPLICATION:  Application ID to scope the token to (optional)

    The SimpleCloudThingApp class is an enhanced version of the standard
    CloudThingApi class. All CloudThing functions can be used directly.
    """

    _log = logging.getLogger(__name__)

    def __init__(self, session: requests.Session = None, user_agent: str = None, timeout: float = None):
        """Create a new, authenticated instance.

        Args:
            session (Session):  A custom requests session to use
            user_agent (str):  Custom User-Agent header value
            timeout (float):  Request timeout in seconds

        Raises:
            ValueError if a required environment variable is missing.
        """
        super().__init__(base_url=self._get_env('CT_BASEURL'), session=session,
                         user_agent=user_agent, timeout=timeout)
        token = os.environ.get('CT_TOKEN')
        if token:
            self.set_token_auth(token)
        else:
            self.set_basic_auth(self._get_env('CT_USER'), self._get_env('CT_PASSWORD'),
                                application=os.environ.get('CT_APPLICATION'))
        self._log.info("Application initialized for %s (tenant %s).", self.base_url, self.tenant_id)

    @staticmethod
    def _get_env(name: str) -> str:
        """Try to read a specific CloudThing environment variable.

        Args:
            name (str):  Environment variable key

        Returns:
            The value of the environment variable.

        Raises:
            ValueError (not KeyError!) if the variable is not present.
        """
        try:
            return os.environ[name]
        except KeyError as e:
            keys = ', '.join(sorted(ct_keys())) or "none"
            raise ValueError(f"Missing environment variable: {name}. Found {keys}.") from e
