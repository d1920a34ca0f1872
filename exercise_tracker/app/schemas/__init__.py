"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shapes returned by the API and are kept
separate from the in‑memory records in ``core.store``.
"""
