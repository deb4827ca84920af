"""Concurrent nonces() reads over a candidate list."""
import asyncio
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Sequence

from nonce_auditor.errors import QueryError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NonceRecord:
    address: str
    nonce: int

    def as_dict(self) -> Dict[str, Any]:
        return {"address": self.address, "nonce": self.nonce}


@dataclass(frozen=True)
class NonceResult:
    """Outcome of a single candidate read: a nonce or the error it raised."""

    address: str
    nonce: Optional[int] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def record(self) -> NonceRecord:
        if self.error is not None:
            raise QueryError(self.address, self.error) from self.error
        return NonceRecord(self.address, self.nonce)


async def _query(gateway: Any, candidate: str) -> NonceRecord:
    try:
        nonce = await gateway.nonces(candidate)
    except Exception as e:
        raise QueryError(candidate, e) from e
    return NonceRecord(candidate, nonce)


async def fetch_nonces(gateway: Any, candidates: Sequence[str]) -> List[NonceRecord]:
    """
    Read nonces() for every candidate at once.

    All calls are in flight together. The first failure is raised and the
    other results are dropped. gather does not cancel the calls still
    pending, but asyncio.run cancels them once the failure ends the run.

    Args:
        gateway: Handle exposing ``async nonces(address) -> int``
        candidates: Candidate addresses

    Returns:
        One record per candidate, in candidate order

    Raises:
        QueryError: a read failed
    """
    logger.info(f"Querying nonces for {len(candidates)} candidates")
    records = await asyncio.gather(*(_query(gateway, c) for c in candidates))
    return list(records)


async def fetch_nonce_results(gateway: Any, candidates: Sequence[str]) -> List[NonceResult]:
    """Like fetch_nonces, but keeps every outcome so one failure does not drop the rest."""
    logger.info(f"Querying nonces for {len(candidates)} candidates (keep going)")
    outcomes = await asyncio.gather(
        *(gateway.nonces(c) for c in candidates),
        return_exceptions=True,
    )

    results: List[NonceResult] = []
    for candidate, outcome in zip(candidates, outcomes):
        if isinstance(outcome, BaseException):
            results.append(NonceResult(candidate, error=outcome))
        else:
            results.append(NonceResult(candidate, nonce=outcome))
    return results


def filter_active(records: Iterable[NonceRecord]) -> List[NonceRecord]:
    """Keep records with a nonzero nonce, in their original order."""
    return [r for r in records if r.nonce > 0]


async def audit(gateway: Any, candidates: Sequence[str]) -> List[NonceRecord]:
    records = await fetch_nonces(gateway, candidates)
    active = filter_active(records)
    logger.info(f"{len(active)}/{len(records)} candidates have a nonzero nonce")
    return active


def to_json(records: Iterable[NonceRecord]) -> str:
    return json.dumps([r.as_dict() for r in records], separators=(",", ":"))
