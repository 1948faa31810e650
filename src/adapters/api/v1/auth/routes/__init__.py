"""Authentication route modules."""
