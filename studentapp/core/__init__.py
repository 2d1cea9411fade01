"""
Core utilities shared across the student records app.

This package hosts configuration, logging setup, error handlers and the
security headers middleware. Routers and services depend on these primitives
instead of reading the environment themselves.
"""
