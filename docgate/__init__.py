"""docgate - HTTP gateway to MongoDB collections.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
