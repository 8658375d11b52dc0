"""Utility modules for podcast-catalog application."""

from .passwords import (
    hash_password,
    is_password_hash,
    verify_password,
)

__all__ = [
    'hash_password',
    'is_password_hash',
    'verify_password',
]
