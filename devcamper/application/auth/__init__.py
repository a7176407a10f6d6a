"""Authentication use cases."""
