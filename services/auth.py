"""
Authorization Service

A single shared passphrase gates every write. The check sits behind a small
Authorizer interface so a different scheme can be configured through the
AUTHORIZER config key.
"""

import hmac
import logging

from flask import current_app

from .errors import AuthError

logger = logging.getLogger(__name__)


class Authorizer:
    """Decides whether a caller-supplied secret may perform admin writes."""

    def is_authorized(self, secret):
        raise NotImplementedError


class SharedSecretAuthorizer(Authorizer):
    """Exact-equality check against one configured secret."""

    def __init__(self, expected):
        self.expected = expected

    def is_authorized(self, secret):
        # An unconfigured server secret never matches, not even an empty one
        if not self.expected or not isinstance(secret, str):
            return False
        return hmac.compare_digest(secret.encode('utf-8'), self.expected.encode('utf-8'))


def get_authorizer():
    """Return the configured authorizer, defaulting to the shared secret."""
    authorizer = current_app.config.get('AUTHORIZER')
    if authorizer is None:
        authorizer = SharedSecretAuthorizer(current_app.config.get('ADMIN_SECRET'))
    return authorizer


def require_admin(admin_secret):
    """Raise AuthError unless admin_secret is accepted."""
    if not get_authorizer().is_authorized(admin_secret):
        logger.warning("Rejected admin request with invalid secret")
        raise AuthError('not authorized')
