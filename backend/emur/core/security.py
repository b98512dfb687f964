"""
Security Utilities
Handles password hashing and at-rest encryption of personal fields.

This module provides:
- Password hashing/verification with passlib (bcrypt, fixed work factor)
- A Fernet cipher derived from the configured encryption secret
- EncryptedText, a SQLAlchemy column type that encrypts on write and
  decrypts on read (used for names and profile images of users)
"""

import base64
import hashlib
from typing import Any, Optional

from cryptography.fernet import Fernet, InvalidToken
from passlib.context import CryptContext
from sqlalchemy.types import Text, TypeDecorator


# Password hashing context using bcrypt (fixed work factor)
BCRYPT_ROUNDS = 8

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        Hashed password string (safe to store in database)

    Example:
        >>> hashed = hash_password("mySecurePassword123")
        >>> print(hashed)  # $2b$08$...
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain_password: Plain text password from user input
        hashed_password: Hashed password from database

    Returns:
        True if password matches, False otherwise (including malformed hashes)
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognizable hash
        return False


# ============================================================================
# Field Encryption
# ============================================================================

_cipher: Optional[Fernet] = None


def build_cipher(secret: str) -> Fernet:
    """Derive a stable Fernet key from an arbitrary secret string."""
    key = base64.urlsafe_b64encode(hashlib.sha256(secret.encode("utf-8")).digest())
    return Fernet(key)


def configure_field_encryption(secret: str) -> None:
    """
    Install the cipher used by EncryptedText columns.

    Called once at process start with settings.encryption_secret.
    """
    global _cipher
    _cipher = build_cipher(secret)


def get_cipher() -> Fernet:
    global _cipher
    if _cipher is None:
        # Entry points configure the cipher explicitly; this covers scripts
        # and shells that import models directly.
        from emur.core.config import get_settings

        _cipher = build_cipher(get_settings().encryption_secret)
    return _cipher


def encrypt_string(value: str) -> str:
    return get_cipher().encrypt(value.encode("utf-8")).decode("utf-8")


def decrypt_string(token: str) -> str:
    """
    Decrypt a value produced by encrypt_string.

    Raises:
        InvalidToken: if the value was not encrypted with the current key
    """
    return get_cipher().decrypt(token.encode("utf-8")).decode("utf-8")


class EncryptedText(TypeDecorator):
    """Encrypts/decrypts text values transparently using Fernet."""

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        if not isinstance(value, str):
            value = str(value)
        return encrypt_string(value)

    def process_result_value(self, value: Any, dialect) -> Any:
        if value is None:
            return None
        try:
            return decrypt_string(value)
        except InvalidToken:
            # Rows written before encryption was enabled hold plain text
            return value
