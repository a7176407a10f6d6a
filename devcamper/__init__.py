"""
DevCamper: bootcamp directory API.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Resources:
    - bootcamps: CRUD over bootcamp listings plus radius search.
    - auth: User registration.

Layers:
    - domain: Entities, ports (ABCs), errors, geo math.
    - application: Use cases, DTOs, list-query parsing.
    - infrastructure: Adapters (MongoDB, geocoding, password hashing).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging, envelope).
"""
