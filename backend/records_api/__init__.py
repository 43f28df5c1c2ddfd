"""Records API Package — thin HTTP layer over a Redis key-value store.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
