"""Audit a gateway contract's per-address nonces."""
from nonce_auditor.auditor import NonceRecord, NonceResult, audit, fetch_nonces, filter_active, to_json
from nonce_auditor.errors import AuditError, MissingArgument, QueryError, ResolutionError

__all__ = [
    "NonceRecord",
    "NonceResult",
    "audit",
    "fetch_nonces",
    "filter_active",
    "to_json",
    "AuditError",
    "MissingArgument",
    "QueryError",
    "ResolutionError",
]
