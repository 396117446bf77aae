# dhpii_client/__init__.py
"""Client library and console for the DHPII detection and anonymization API"""

from .client import DHPIIClient, error_message

__version__ = "0.1.0"

__all__ = ['DHPIIClient', 'error_message', '__version__']
