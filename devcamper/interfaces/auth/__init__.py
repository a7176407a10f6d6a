"""Authentication routes."""
