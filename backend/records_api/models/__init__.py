"""Persistence Models — the shape records take inside the store.

Design Decisions:
    - Separate from schemas: schemas are API contracts, models are storage
"""
