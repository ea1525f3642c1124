"""Signing key value object with public key decoding."""

import base64
import binascii
import hashlib
from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPublicKey

from ..exceptions import PublicKeyError


@dataclass(frozen=True)
class SigningKey:
    """Public signing key of the identity provider.

    Accepts the base64 encoded DER (X.509 SubjectPublicKeyInfo) form that
    identity providers publish in their realm settings, or full PEM text.
    Handles ONLY key representation and decoding.
    """

    key_data: str

    def __post_init__(self) -> None:
        """Validate signing key data."""
        if not isinstance(self.key_data, str):
            raise PublicKeyError("Signing key data must be a string")

        if not self.key_data.strip():
            raise PublicKeyError("Signing key data cannot be empty")

    @property
    def is_pem(self) -> bool:
        """Check if key data is PEM text rather than bare base64."""
        return self.key_data.lstrip().startswith("-----BEGIN")

    def load(self) -> RSAPublicKey:
        """Decode key data into an RSA public key.

        Returns:
            RSA public key usable for JWT signature verification

        Raises:
            PublicKeyError: If key data cannot be decoded or is not RSA
        """
        try:
            if self.is_pem:
                key = serialization.load_pem_public_key(self.key_data.strip().encode("utf-8"))
            else:
                # Providers wrap long keys over several lines
                normalized = "".join(self.key_data.split())
                der_bytes = base64.b64decode(normalized, validate=True)
                key = serialization.load_der_public_key(der_bytes)
        except (ValueError, TypeError, binascii.Error, UnsupportedAlgorithm) as e:
            raise PublicKeyError(
                "Could not process public signing key",
                details={"fingerprint": self.fingerprint(), "reason": str(e)},
            ) from e

        if not isinstance(key, RSAPublicKey):
            raise PublicKeyError(
                f"Signing key must be an RSA public key, got {type(key).__name__}",
                details={"fingerprint": self.fingerprint()},
            )

        return key

    def fingerprint(self) -> str:
        """Generate a fingerprint for the key (for identification in logs)."""
        normalized_key = "".join(self.key_data.split())
        hex_fingerprint = hashlib.sha256(normalized_key.encode("utf-8")).hexdigest()
        return ":".join(hex_fingerprint[i:i + 2] for i in range(0, 16, 2))

    def mask_for_logging(self) -> str:
        """Return masked key safe for logging."""
        normalized_key = "".join(self.key_data.split())
        if len(normalized_key) <= 12:
            return "***"
        return f"{normalized_key[:6]}...{normalized_key[-6:]}"

    def __str__(self) -> str:
        """String representation (masked for security)."""
        key_format = "PEM" if self.is_pem else "DER/base64"
        return f"SigningKey(format={key_format}, fingerprint={self.fingerprint()})"

    def __repr__(self) -> str:
        """Debug representation (masked for security)."""
        return f"SigningKey(key_data='{self.mask_for_logging()}')"
