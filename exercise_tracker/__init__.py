"""
Top‑level package for the Exercise Tracker API.

All functionality lives in submodules under ``app``; the HTTP client
for talking to a running server lives in ``client``.  Importing the
package itself has no side effects.
"""

__all__ = []
