"""Bootcamp-specific use cases: address geocoding and radius search."""
