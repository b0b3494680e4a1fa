"""Infrastructure Layer — process-level wiring (logging setup).

Invariants:
    - Nothing in core/ or schemas/ imports from infrastructure/
"""
