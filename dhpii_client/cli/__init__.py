# dhpii_client/cli/__init__.py
"""Command line console for the DHPII API"""
