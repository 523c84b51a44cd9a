# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from requests.auth import AuthBase

from cloudthing_api._jwt import JWT


class HTTPBearerAuth(AuthBase):
    """Token based authentication."""

    def __init__(self, token: str):
        self.token = token

    def __call__(self, r):
        r.headers['Authorization'] = 'Bearer ' + self.token
        return r


@dataclass(frozen=True)
class Token:
    """An access token as issued by the CloudThing authentication endpoint.

    Tokens are immutable; re-authentication supersedes a token as a whole.
    """
    token: str
    type: str = 'Bearer'
    expires_in: int = 0

    @classmethod
    def from_json(cls, json: dict) -> Token:
        """Create a Token instance from CloudThing JSON format.

        Raises:
            ValueError if the JSON does not contain a (string) token.
        """
        if not isinstance(json, dict) or not json.get('token') or not isinstance(json['token'], str):
            raise ValueError("Unexpected authentication response. No token included.")
        return Token(token=json['token'], type=json.get('type', 'Bearer'), expires_in=json.get('expiresIn', 0))

    def to_json(self) -> dict:
        # pylint: disable=missing-function-docstring
        return {'token': self.token, 'type': self.type, 'expiresIn': self.expires_in}

    @property
    def jwt(self) -> JWT:
        """Provide the decodable JWT representation of this token."""
        return JWT(self.token)


class AuthState:
    """Holder of a client's session, i.e. the current token and the
    tenant ID derived from it.

    All access goes through an internal lock; readers receive an immutable
    snapshot of the session instead of the live state.
    """

    @dataclass(frozen=True)
    class Snapshot:
        """Immutable view of a session."""
        token: Token | None = None
        tenant_id: str | None = None

    def __init__(self):
        self._lock = threading.RLock()
        self._snapshot = AuthState.Snapshot()

    def snapshot(self) -> AuthState.Snapshot:
        """Provide the current session state."""
        with self._lock:
            return self._snapshot

    def commit(self, token: Token) -> AuthState.Snapshot:
        """Commit a token to this session.

        The tenant ID is derived from the token's issuer claim before
        anything is changed.

        Raises:
            ValueError if the tenant ID cannot be derived from the token;
                the session remains unchanged in this case.
        """
        tenant_id = token.jwt.tenant_id
        with self._lock:
            self._snapshot = AuthState.Snapshot(token=token, tenant_id=tenant_id)
            return self._snapshot

    def clear(self):
        """Reset the session to unauthenticated."""
        with self._lock:
            self._snapshot = AuthState.Snapshot()

    @staticmethod
    def is_valid(token: Token | None, now: float = None) -> bool:
        """Check whether a token is present and not yet expired.

        Args:
            token (Token):  The token to check
            now (float):  Reference time (seconds since epoch), defaults
                to the current wall-clock time

        Returns:
            True if the token's expiration claim lies in the future,
            False if it is absent, undecodable or in the past.
        """
        if not token:
            return False
        try:
            expiration = token.jwt.expiration
        except ValueError:
            return False
        # bool is a subclass of int but never a valid timestamp
        if isinstance(expiration, bool) or not isinstance(expiration, (int, float)):
            return False
        return expiration > (now if now is not None else time.time())
