"""
Persistence adapters.

Services depend on these repositories rather than opening sessions themselves.
"""
