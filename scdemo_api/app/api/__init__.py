"""
API package containing the HTTP routes.

``router`` aggregates every domain router under ``/api``; endpoint
modules live in ``endpoints``.
"""
