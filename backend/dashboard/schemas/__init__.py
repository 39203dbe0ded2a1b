"""Pydantic Schemas: validation at the system boundary (forms, credentials, listings).

Invariants:
    - Schemas validate untrusted input; they never touch storage
    - Form validation returns results, it never raises

Design Decisions:
    - Separate from models: schemas are input/output contracts, models are persistence
"""
