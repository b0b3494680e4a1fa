"""Pydantic Schemas — request payload contracts for the admin API.

Invariants:
    - Schemas validate at system boundary (untrusted request bodies)
    - Unknown fields are dropped, never preserved or rejected
    - String fields accept only str, numeric fields only int/float (no coercion)

Design Decisions:
    - Wire names are camelCase (JS front-end), attributes are snake_case
"""
