"""Utility modules for Passto."""

from . import canonical_json

__all__ = ['canonical_json']
