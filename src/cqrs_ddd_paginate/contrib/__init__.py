"""Optional executor backends."""
