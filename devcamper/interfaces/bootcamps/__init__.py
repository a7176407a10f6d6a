"""Bootcamp routes."""
