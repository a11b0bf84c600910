"""Process-level configuration (logging)."""
