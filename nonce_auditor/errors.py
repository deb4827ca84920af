"""Errors raised by a nonce audit run."""
from typing import Optional


class AuditError(Exception):
    """Base class for failures that abort an audit run."""


class MissingArgument(AuditError):
    """Raised when a required command line argument is absent."""


class ResolutionError(AuditError):
    """Raised when the gateway address cannot be bound to a contract."""


class QueryError(AuditError):
    """Raised when a nonces() read fails for a candidate."""

    def __init__(self, candidate: str, cause: Optional[BaseException] = None):
        self.candidate = candidate
        self.cause = cause
        message = f"nonces({candidate}) failed"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ExplorerError(AuditError):
    """Raised when the block explorer API returns an unusable response."""
