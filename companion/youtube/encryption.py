"""Symmetric encryption of sensitive query parameters.

Uses JWE compact serialization (direct key agreement, AES-256-GCM) so the
ciphertext is URL safe. The 256-bit content key is derived from the
configured secret.
"""

import hashlib

from jose import jwe
from jose.constants import ALGORITHMS

from companion.config import Config


def _derive_key(secret: str) -> bytes:
    if not secret:
        raise ValueError("ENCRYPTION_SECRET must be configured")
    return hashlib.sha256(secret.encode("utf-8")).digest()


def encrypt_query(plaintext: str, config: Config) -> str:
    """Encrypt a JSON payload of private query parameters.

    Args:
        plaintext: Serialized ``[[key, value], ...]`` pairs.
        config: Application configuration holding ENCRYPTION_SECRET.

    Returns:
        str: JWE compact token.

    Raises:
        ValueError: If no encryption secret is configured.
    """
    token = jwe.encrypt(
        plaintext,
        _derive_key(config.ENCRYPTION_SECRET),
        algorithm=ALGORITHMS.DIR,
        encryption=ALGORITHMS.A256GCM,
    )
    return token.decode("utf-8") if isinstance(token, bytes) else token


def decrypt_query(token: str, config: Config) -> str:
    """Reverse :func:`encrypt_query`."""
    plaintext = jwe.decrypt(token, _derive_key(config.ENCRYPTION_SECRET))
    return plaintext.decode("utf-8")
