"""
Security Utilities

Password hashing, JWT management and approval token issuance.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation.

JWT Tokens:
===========
Uses PyJWT for admin-portal access tokens.

Approval Tokens:
================
Opaque, URL-safe, unguessable strings bound to one pending account.
They are single-use: the approval workflow clears the token in the same
UPDATE that promotes the account.

Usage:
======
    from acrossmedia.shared.utils.security import SecurityUtils

    hashed = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", hashed)

    token = SecurityUtils.generate_approval_token()
"""

from datetime import datetime, timedelta, timezone
import secrets
from typing import Optional

import jwt
from passlib.context import CryptContext


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)

# 32 random bytes → 43 URL-safe characters
APPROVAL_TOKEN_BYTES = 32


class SecurityUtils:
    """Security helpers for authentication and account approval."""

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash password using bcrypt."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify password against bcrypt hash."""
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # APPROVAL TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def generate_approval_token() -> str:
        """
        Issue a fresh approval token.

        Uniqueness across accounts is backed by the unique index on
        accounts.approval_token.
        """
        return secrets.token_urlsafe(APPROVAL_TOKEN_BYTES)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (account_id, role)
            secret_key: Secret key for signing
            expires_delta: Token lifetime (default: 1 day)
            algorithm: JWT algorithm

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        to_encode.update({
            "exp": now + (expires_delta or timedelta(days=1)),
            "iat": now,
        })
        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Decode and verify JWT token.

        Raises:
            ValueError: If token is expired or invalid
        """
        try:
            return jwt.decode(token, secret_key, algorithms=[algorithm])
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
