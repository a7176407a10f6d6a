"""HTTP security: secure headers and rate limiting."""
