"""Core Layer — domain types and the error hierarchy, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
"""
