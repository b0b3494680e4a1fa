"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from infrastructure/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core: validators return results, the HTTP shell decides status codes
"""
