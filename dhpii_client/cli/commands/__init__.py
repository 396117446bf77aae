# dhpii_client/cli/commands/__init__.py
"""CLI command modules"""

from . import detect, anonymize, info, config

__all__ = ['detect', 'anonymize', 'info', 'config']
