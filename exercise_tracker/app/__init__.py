"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, errors, dates and the
in‑memory store), ``schemas`` (request/response models), ``services``
(business logic) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
