"""
Domain records as stored by the repositories.

These are plain dataclasses independent of the API representation in
``employee_api.app.schemas``.
"""

from .employee import Employee

__all__ = ["Employee"]
