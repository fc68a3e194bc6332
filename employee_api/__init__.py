"""
Top‑level package for the Employee Management API.

The FastAPI application lives under ``employee_api.app``; a small
``requests`` based client for the same REST contract is available in
``employee_api.client``.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
