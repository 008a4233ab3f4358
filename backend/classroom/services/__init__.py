"""Services Layer — StudentRegistry and TeacherRegistry.

Invariants:
    - Registries talk to storage only through core/repository_protocols.py
    - Every identifier is normalized and validated before a store call

Design Decisions:
    - Logger injected at construction, not module-global (ADR: explicit dependencies)
"""
