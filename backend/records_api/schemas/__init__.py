"""Pydantic Schemas — request/response contracts for the HTTP API.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)
"""
