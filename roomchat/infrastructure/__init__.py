"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: SQLAlchemy models, engine setup and repository implementations
- security/: bcrypt password hashing and JWT access tokens
"""
