"""Infrastructure Layer — store client, record gateway, logging setup.

Invariants:
    - Infrastructure never imports from api/
    - Every redis-py exception is mapped to a core/errors.py type here
"""
