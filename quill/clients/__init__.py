"""
Cache clients.

Import directly from the specific modules to avoid circular dependencies.
"""
