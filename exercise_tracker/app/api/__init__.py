"""
API package containing the HTTP routes.

``router`` aggregates the domain routers under ``endpoints``; the
application mounts it under ``settings.api_prefix``.
"""
