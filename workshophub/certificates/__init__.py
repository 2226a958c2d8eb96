"""Certificate registry (external certificate URLs)."""
