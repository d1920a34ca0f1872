"""
Service layer abstraction.

Each service encapsulates business logic for a domain and operates on
the ``UserStore`` it is constructed with, so API handlers never touch
the store directly.
"""
