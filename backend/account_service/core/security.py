# account_service/core/security.py
"""
Security module for credential handling.
Handles password hashing and one-way password verification.
"""
from passlib.context import CryptContext

# Password hashing context
# Argon2 is a modern, memory-hard password hashing algorithm
pwd_context = CryptContext(
    schemes=["argon2"],  # Use Argon2 for password hashing
    deprecated="auto",   # Automatically handle deprecated schemes
)

def hash_password(plain: str) -> str:
    """
    Hash a plain text password using Argon2.

    Args:
        plain: Plain text password to hash

    Returns:
        Hashed password string (safe to store)

    Note: Never store plain text passwords. Always use this function before saving.
    """
    return pwd_context.hash(plain)

def verify_password(plain: str, hashed: str) -> bool:
    """
    Verify a plain text password against a hashed password.

    Args:
        plain: Plain text password to verify
        hashed: Hashed password from the user store

    Returns:
        True if password matches, False otherwise
    """
    return pwd_context.verify(plain, hashed)
