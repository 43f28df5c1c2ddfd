"""Domain Types — identifiers and store outcome kinds.

Invariants:
    - RecordId wraps the opaque string id (uuid4 text today, never parsed)
    - Every store failure is one StoreErrorKind — no raw string matching
"""

from enum import Enum
from typing import NewType


RecordId = NewType("RecordId", str)


class StoreErrorKind(str, Enum):
    """Outcome of a failed store operation."""
    NOT_FOUND = "not_found"
    TRANSPORT = "transport"
    CORRUPT = "corrupt"
    WRITE_FAILED = "write_failed"
    READ_FAILED = "read_failed"
