"""Error types raised by the classifier, snapshot codec, and file adapter."""

from __future__ import annotations

from enum import Enum


class SnapshotIssue(str, Enum):
    """Reasons a persisted snapshot can be rejected, in validation order."""

    UNREADABLE = "unreadable"
    UNSUPPORTED_VERSION = "unsupported_version"
    INVALID_CATEGORY_NAME = "invalid_category_name"
    INVALID_TALLY = "invalid_tally"
    INVALID_TOKEN_NAME = "invalid_token_name"
    INVALID_TOKEN_COUNT = "invalid_token_count"
    TALLY_MISMATCH = "tally_mismatch"


class InvalidArgumentError(ValueError):
    """A caller-supplied argument was rejected before any state changed.

    Raised for malformed category names, relative model paths, and
    streams that cannot be read from or written to.
    """


class InvalidDataError(ValueError):
    """A persisted snapshot failed structural validation.

    Attributes:
        issue: Which validation check rejected the payload.
    """

    def __init__(self, issue: SnapshotIssue, message: str) -> None:
        super().__init__(message)
        self.issue = issue
