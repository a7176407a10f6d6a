"""Geocoding adapters."""
