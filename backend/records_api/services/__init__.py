"""Services — conversions between wire DTOs and stored records.

Invariants:
    - Services never touch the store client directly
"""
