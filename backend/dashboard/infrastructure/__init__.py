"""Infrastructure Layer: database, repositories, view cache, identity provider, logging.

Invariants:
    - Implements the Protocols in core/repository_protocols.py
    - Converts driver exceptions into core/errors.py types at the boundary
"""
