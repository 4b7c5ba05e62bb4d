"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each demo (duplicate-execution guard, ranking, persons,
shapes, uploads, etc.) keeps its schemas in ``schemas``, its logic in
``services`` and exposes a router defined in ``api/endpoints``.
"""

from .main import app  # noqa: F401
