"""Schemas — Pydantic request/response models for the HTTP boundary.

Invariants:
    - Schemas check shape only; email rules live in core/normalize_email.py

Design Decisions:
    - Email format is not validated here: the registries raise the typed
      InvalidIdentifierError so HTTP and non-HTTP callers see the same error
"""
