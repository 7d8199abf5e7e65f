"""Core Layer - errors, identifiers, document conversion and store contracts.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - No IO: store access happens only through store_protocols
"""
