"""ID and timestamp factories for ledger records.

All timestamps are ``datetime`` with ``tzinfo=timezone.utc``, never naive.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone


def new_id(prefix: str = "") -> str:
    """Generate a new UUID v4 string, optionally prefixed (``"tr_"``, ``"acc_"``)."""
    return f"{prefix}{uuid.uuid4()}"


def utc_now() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)
