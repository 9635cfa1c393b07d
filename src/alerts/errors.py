"""Exceptions raised while building alerts."""

from typing import Optional


class MalformedRecordError(Exception):
    """Raised when a single input record cannot produce a meaningful alert."""

    def __init__(self, record_type: str, record_id: Optional[str], reason: str):
        self.record_type = record_type
        self.record_id = record_id
        self.reason = reason
        super().__init__(f"Malformed {record_type} {record_id!r}: {reason}")


class DataFetchError(Exception):
    """Raised when one or more input fetches failed, aborting the refresh."""

    def __init__(self, failures: dict[str, BaseException]):
        self.failures = failures
        detail = "; ".join(f"{source}: {err}" for source, err in failures.items())
        super().__init__(f"Failed to fetch alert inputs ({detail})")
