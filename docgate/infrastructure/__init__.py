"""Infrastructure Layer - store client and logging setup.

Invariants:
    - Driver exceptions never leave this layer unmapped
"""
