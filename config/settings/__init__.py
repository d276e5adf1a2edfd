"""
Django settings package for the retail shop manager.

This package contains environment-specific settings modules:
- base.py: Common settings for all environments
- development.py: Local development on SQLite
- production.py: PostgreSQL, hardened cookies and HTTPS
- test.py: In-memory SQLite used by pytest

The appropriate settings module is loaded based on the DJANGO_SETTINGS_MODULE
environment variable.
"""
