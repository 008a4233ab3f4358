"""Infrastructure Layer — database sessions, SQL-backed stores, logging.

Invariants:
    - Only this layer (and models/db) imports SQLAlchemy
    - Store implementations satisfy core/repository_protocols.py structurally

Design Decisions:
    - Imperative shell around the pure core (ADR: impureim sandwich)
"""
