"""
High-level use cases for the student records app.

Routers call these services instead of touching repositories or sessions
directly.
"""
