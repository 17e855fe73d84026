"""Identity verification for bearer credentials.

The rest of the system only needs an email for a verified credential; the
Firebase adapter checks the ID token signature, issuer and audience with
google-auth and returns the ``email`` claim.
"""
from __future__ import annotations

import logging
from typing import Protocol

import google.auth.exceptions
import google.auth.transport.requests
from google.oauth2 import id_token

from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


class IdentityVerifier(Protocol):
    def verify(self, token: str) -> str:
        """Return the verified actor email or raise ``AuthenticationError``."""

        raise NotImplementedError


class FirebaseIdentityVerifier:
    def __init__(self, project_id: str, *, request=None):
        self._project_id = project_id
        self._request = request or google.auth.transport.requests.Request()

    def verify(self, token: str) -> str:
        if not token:
            raise AuthenticationError("Unauthorized")

        try:
            claims = id_token.verify_firebase_token(token, self._request, audience=self._project_id)
        except (ValueError, google.auth.exceptions.GoogleAuthError) as e:
            logger.warning("Rejected ID token: %s", e)
            raise AuthenticationError("Invalid token") from e

        email = (claims or {}).get("email")
        if not email:
            raise AuthenticationError("Token has no email claim")
        return email
