"""Request-level services."""
