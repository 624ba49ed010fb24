"""
Configuration package.

This package provides library configuration management
via Settings class loaded from environment variables.
"""

from .settings import Settings, env_bool, server_timezone

__all__ = ['Settings', 'env_bool', 'server_timezone']
