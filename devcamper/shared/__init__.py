"""
Shared cross-cutting concerns.

Error reporting, the response envelope, logging and HTTP security.
"""
