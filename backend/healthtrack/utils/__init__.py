"""Utilities module."""

from .auth import decode_principal, get_current_principal

__all__ = ['decode_principal', 'get_current_principal']
