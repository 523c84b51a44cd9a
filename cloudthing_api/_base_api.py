# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Dict, Union
from urllib.parse import urlencode, urljoin

import requests
from requests.auth import AuthBase, HTTPBasicAuth

from cloudthing_api._auth import AuthState, HTTPBearerAuth, Token
from cloudthing_api._jwt import JWT


__version__ = '0.1.0'


class CloudThingApiError(ValueError):
    """Raised when a response status does not match the expected
    status of an operation."""

    def __init__(self, status_code: int, message: str = None):
        text = f"Unexpected response status: {status_code}"
        if message:
            text += f" Response:\n{message}"
        super().__init__(text)
        self.status_code = status_code
        self.message = message

    @classmethod
    def from_response(cls, response: requests.Response) -> CloudThingApiError:
        """Build an error instance from a response."""
        return cls(response.status_code, response.text or None)


class AuthenticationRequiredError(RuntimeError):
    """Raised when an operation is attempted without a valid session."""


@dataclass(frozen=True)
class Pagination:
    """Pagination hint for a collection, both for the collection itself
    and for expanded sub collections."""
    limit: int = 25
    page: int = 1

    def format(self) -> str:
        """Format as nested expansion hint, e.g. `limit:10,page:2`."""
        return f'limit:{self.limit},page:{self.page}'


Expansion = Union[str, Iterable[str], Mapping[str, Union[Pagination, None]]]


class CloudThingRestApi:
    """CloudThing base REST API.

    Provides authenticated REST access to a CloudThing instance. All
    requests are funneled through the `request` function which enforces
    a valid session.
    """

    VERSION = __version__
    API_PATH = '/api/v1/'
    MIMETYPE_JSON = 'application/json'
    USER_AGENT = f'cloudthing-python-client/{__version__}'

    _log = logging.getLogger(__name__)

    def __init__(self, base_url: str, session: requests.Session = None,
                 user_agent: str = None, timeout: float = None):
        """Build a CloudThingRestApi instance.

        The instance is unauthenticated; use `set_basic_auth` or
        `set_token_auth` before accessing any resource.

        Args:
            base_url (str):  CloudThing base URL, e.g. https://tenant.cloudthing.io
            session (Session):  A custom requests session to use
            user_agent (str):  Custom User-Agent header value
            timeout (float):  Request timeout in seconds (passed to requests)
        """
        self.base_url = base_url.rstrip('/')
        self.api_url = self.base_url + self.API_PATH
        self.user_agent = user_agent or self.USER_AGENT
        self.timeout = timeout
        self.session = session or requests.Session()
        self._auth_state = AuthState()

    @property
    def tenant_id(self) -> str | None:
        """The tenant ID derived from the current token (if any)."""
        return self._auth_state.snapshot().tenant_id

    def get_token(self) -> Token | None:
        """Provide the current session token (if any)."""
        return self._auth_state.snapshot().token

    def is_authenticated(self) -> bool:
        """Check whether the session holds a not yet expired token."""
        return AuthState.is_valid(self._auth_state.snapshot().token)

    def get_auth_token(self, username: str, password: str, application: str = None) -> Token:
        """Request a new access token using basic credentials.

        The token is not stored within the session; use `set_basic_auth`
        to authenticate this instance.

        Args:
            username (str):  Username
            password (str):  User password
            application (str):  ID of an application to scope the token to

        Returns:
            The issued Token.

        Raises:
            CloudThingApiError if the response status is not 200.
        """
        url = urljoin(self.api_url, 'auth/token')
        if application:
            url += '?' + urlencode({'application': application})
        r = self._send('POST', url, auth=HTTPBasicAuth(username, password))
        if r.status_code != 200:
            raise CloudThingApiError.from_response(r)
        return Token.from_json(r.json())

    def set_basic_auth(self, username: str, password: str, application: str = None):
        """Authenticate this instance using basic credentials.

        See also `get_auth_token`.

        Raises:
            CloudThingApiError if the token request failed.
            ValueError if the issued token cannot be decoded.
        """
        token = self.get_auth_token(username, password, application)
        snapshot = self._auth_state.commit(token)
        self._log.info("Authenticated as %s for tenant %s.", username, snapshot.tenant_id)

    def set_token_auth(self, token: Token | str):
        """Authenticate this instance using a previously issued token.

        The token is verified against the API before it is committed. The
        session remains unchanged if anything fails.

        Args:
            token (Token|str):  A Token instance or a raw JWT string

        Raises:
            ValueError if the tenant ID cannot be derived from the token.
            CloudThingApiError if the API does not accept the token.
        """
        if isinstance(token, str):
            token = Token(token=token)
        tenant_id = JWT(token.token).tenant_id
        r = self._send('GET', self.api_url, auth=HTTPBearerAuth(token.token))
        if r.status_code != 200:
            raise CloudThingApiError.from_response(r)
        self._auth_state.commit(token)
        self._log.info("Token authentication accepted for tenant %s.", tenant_id)

    def revoke_token(self):
        """Revoke the current session token.

        Raises:
            AuthenticationRequiredError if this instance is not authenticated.
            CloudThingApiError if the response status is not 204.
        """
        if not self.is_authenticated():
            raise AuthenticationRequiredError("Unable to revoke token. Not authenticated.")
        r = self.request('DELETE', 'auth/token')
        if r.status_code != 204:
            raise CloudThingApiError.from_response(r)
        self._auth_state.clear()
        self._log.info("Token revoked.")

    def build_url(self, resource: str, limit: int = None, page: int = None,
                  expand: Expansion = None, params: Dict[str, str] = None) -> str:
        """Build the absolute URL for a resource.

        Args:
            resource (str):  A path relative to the API base URL, a root
                relative path or an absolute URL
            limit (int):  Collection page size
            page (int):  Collection page number
            expand (str|Iterable|Mapping):  Relations to expand, optionally
                mapped to nested Pagination hints
            params (dict):  Additional query parameters

        Returns:
            The absolute URL including all query parameters.
        """
        url = urljoin(self.api_url, resource)
        query = self._prepare_query(limit=limit, page=page, expand=expand, params=params)
        if query:
            url += ('&' if '?' in url else '?') + query
        return url

    def request(self, method: str, resource: str, json: dict | list = None,
                limit: int = None, page: int = None, expand: Expansion = None,
                params: Dict[str, str] = None) -> requests.Response:
        """Perform an authenticated request.

        The response status is not interpreted; this is up to the caller.

        Args:
            method (str):  HTTP method, e.g. 'GET', 'POST', 'DELETE'
            resource (str):  Relative path or absolute URL (see `build_url`)
            json (dict|list):  JSON body to send
            limit (int):  Collection page size
            page (int):  Collection page number
            expand (str|Iterable|Mapping):  Relations to expand
            params (dict):  Additional query parameters

        Returns:
            The response object.

        Raises:
            AuthenticationRequiredError if the session is not authenticated
                (no request is sent in this case).
        """
        token = self._auth_state.snapshot().token
        if not AuthState.is_valid(token):
            raise AuthenticationRequiredError(f"Unable to perform {method} request. Not authenticated.")
        url = self.build_url(resource, limit=limit, page=page, expand=expand, params=params)
        return self._send(method, url, json=json, auth=HTTPBearerAuth(token.token))

    def get(self, resource: str, expected: int = 200, **options) -> dict:
        """Generic HTTP GET wrapper, dealing with standard error returning
        a JSON body object.

        Args:
            resource (str): Resource path or URL
            expected (int): Expected response status
            options: Pagination, expansion and query parameters,
                see `request`

        Returns:
            The JSON response (nested dict)

        Raises:
            CloudThingApiError if the response status is not as expected.
        """
        r = self.request('GET', resource, **options)
        return self._parse_response(r, expected)

    def post(self, resource: str, json: dict | list, expected: int = 201, **options) -> dict | list:
        """Generic HTTP POST wrapper, dealing with standard error returning
        a JSON body object.

        Args:
            resource (str): Resource path or URL
            json (dict|list): JSON body
            expected (int): Expected response status (default 201)
            options: Query parameters, see `request`

        Returns:
             The JSON response (nested dict)

        Raises:
            CloudThingApiError if the response status is not as expected.
        """
        r = self.request('POST', resource, json=json, **options)
        return self._parse_response(r, expected)

    def delete(self, resource: str):
        """Generic HTTP DELETE wrapper.

        Raises:
            CloudThingApiError if the response status is not 204.
        """
        r = self.request('DELETE', resource)
        if r.status_code != 204:
            raise CloudThingApiError.from_response(r)

    def _send(self, method: str, url: str, json: dict | list = None, auth: AuthBase = None) -> requests.Response:
        r = self.session.request(method, url, json=json, headers=self._prepare_headers(),
                                 auth=auth, timeout=self.timeout)
        self._log.debug("%s %s: %d", method, url, r.status_code)
        return r

    def _prepare_headers(self) -> Dict[str, str]:
        return {'Accept': self.MIMETYPE_JSON,
                'Content-Type': self.MIMETYPE_JSON,
                'User-Agent': self.user_agent}

    @staticmethod
    def _parse_response(r: requests.Response, expected: int) -> dict | list:
        if r.status_code != expected:
            raise CloudThingApiError.from_response(r)
        if r.content:
            return r.json()
        return {}

    @staticmethod
    def _prepare_query(limit: int = None, page: int = None, expand: Expansion = None,
                       params: Dict[str, str] = None) -> str:
        query = {}
        if limit is not None:
            query['limit'] = limit
        if page is not None:
            query['page'] = page
        if expand:
            query['expand'] = CloudThingRestApi._format_expand(expand)
        if params:
            query.update({k: v for k, v in params.items() if v is not None})
        return urlencode(query, safe=',():')

    @staticmethod
    def _format_expand(expand: Expansion) -> str:
        if isinstance(expand, str):
            return expand
        if isinstance(expand, Mapping):
            return ','.join(f'{name}({pagination.format()})' if pagination else name
                            for name, pagination in expand.items())
        return ','.join(expand)
