"""Pytest configuration and fixtures for external-auth tests."""

import base64
import time
from unittest.mock import MagicMock

import jwt
import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from external_auth.core.entities import InternalUser
from external_auth.core.protocols import AuthenticationEventListener

ISSUER = "https://keycloak.example.com/auth/realms/example"


@pytest.fixture(scope="session")
def rsa_private_key():
    """RSA key pair standing in for the identity provider's realm key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def other_private_key():
    """Unrelated RSA key pair for forged tokens."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def signing_key_b64(rsa_private_key):
    """Public key as base64 DER, the form identity providers publish."""
    der_bytes = rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return base64.b64encode(der_bytes).decode("ascii")


@pytest.fixture(scope="session")
def signing_key_pem(rsa_private_key):
    """Public key as PEM text."""
    return rsa_private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("ascii")


@pytest.fixture
def valid_claims():
    """Claims of a typical Keycloak access token."""
    now = int(time.time())
    return {
        "iss": ISSUER,
        "sub": "f3c1a2b4-0000-4000-8000-000000000001",
        "iat": now,
        "exp": now + 300,
        "preferred_username": "alice",
        "given_name": "Alice",
        "family_name": "Anders",
        "email": "alice@example.com",
        "groups": ["/staff"],
        "realm_access": {"roles": ["user"]},
        "resource_access": {"account": {"roles": ["manage-account"]}},
    }


@pytest.fixture
def make_token(rsa_private_key, valid_claims):
    """Factory for RS256 tokens; keyword arguments override or drop claims."""
    def _make_token(private_key=None, drop=(), **overrides):
        claims = dict(valid_claims)
        claims.update(overrides)
        for claim_name in drop:
            claims.pop(claim_name, None)
        return jwt.encode(claims, private_key or rsa_private_key, algorithm="RS256")
    return _make_token


@pytest.fixture
def sample_user():
    """Sample internal user for testing."""
    return InternalUser(
        username="bob",
        firstname="Bob",
        lastname="Smith",
        email="bob@example.com",
        groups=frozenset({"staff"}),
        roles=frozenset({"admin", "user"}),
    )


@pytest.fixture
def recording_listener():
    """Listener mock that records every event it receives."""
    return MagicMock(spec=AuthenticationEventListener)


@pytest.fixture
def stub_strategy():
    """Factory for strategies with a scripted verify outcome."""
    def _stub_strategy(result=None, side_effect=None, name="stub"):
        strategy = MagicMock()
        strategy.name = name
        strategy.verify.return_value = result
        strategy.verify.side_effect = side_effect
        return strategy
    return _stub_strategy
