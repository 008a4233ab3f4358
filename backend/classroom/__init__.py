"""Classroom Registry Package — teacher/student relationship engine.

Invariants:
    - Package root holds only the version string (no import side-effects)

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
