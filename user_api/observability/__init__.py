"""Request correlation and logging helpers.

Request IDs are bound into structlog contextvars so every log line emitted while
handling a request carries the same identifier as the response header.
"""
