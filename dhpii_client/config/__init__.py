# dhpii_client/config/__init__.py

from .settings import Config

__all__ = ['Config']
