# Copyright (c) 2020 Software AG,
# Darmstadt, Germany and/or Software AG USA Inc., Reston, VA, USA,
# and/or its subsidiaries and/or its affiliates and/or their licensors.
# Use, reproduction, transfer, publication or disclosure is prohibited except
# as specifically provided for in your License Agreement with Software AG.

from __future__ import annotations

import base64
import json


class JWT:
    """Simple JWT toolkit.

    This class is used to parse CloudThing's JWT tokens. The signature is
    not verified, only the payload claims are decoded.
    """

    def __init__(self, token: str | bytes):
        self.token = token if isinstance(token, bytes) else token.encode('utf-8')
        self._body: dict | None = None

    @property
    def payload(self) -> dict:
        """Return the JWT payload as JSON document.

        Raises:
            ValueError if the token cannot be decoded.
        """
        if self._body is None:
            jwt_parts = self.token.split(b'.')
            if len(jwt_parts) != 3:
                raise ValueError("Unexpected token format (Invalid number of parts, not an JWT?).")
            # The JWT body might not be padded, hence we add padding
            # characters which are ignored if they are not necessary.
            body = jwt_parts[1] + b'=='
            payload = json.loads(base64.urlsafe_b64decode(body))
            if not isinstance(payload, dict):
                raise ValueError("Unexpected token format (payload is not a JSON object).")
            self._body = payload
        return self._body

    @property
    def issuer(self) -> str:
        """Read the issuer from the token payload."""
        return self.get_claim('iss')

    @property
    def expiration(self) -> int | float | None:
        """Read the expiration timestamp (seconds since epoch) from the
        token payload. None if the claim is not present."""
        return self.payload.get('exp')

    @property
    def tenant_id(self) -> str:
        """Read the tenant ID from the token payload.

        The tenant ID is the last path segment of the issuer claim, e.g.
        `https://host/api/v1/tenants/T123` resolves to `T123`.

        Raises:
            ValueError if the issuer claim is missing or malformed.
        """
        try:
            issuer = self.issuer
        except KeyError as e:
            raise ValueError("Unable to resolve tenant ID. JWT does not include an issuer claim.") from e
        if not isinstance(issuer, str) or '/' not in issuer:
            raise ValueError(f"Unable to resolve tenant ID from issuer claim: {issuer}")
        tenant_id = issuer.split('/')[-1]
        if not tenant_id:
            raise ValueError(f"Unable to resolve tenant ID from issuer claim: {issuer}")
        return tenant_id

    def get_claim(self, claim: str):
        """Read a claim from the token payload."""
        return self.payload[claim]
