"""
Top-level package for the SC Demo API.

This file makes ``scdemo_api`` a Python package so that modules within
``app`` can be imported using fully qualified names like
``scdemo_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
