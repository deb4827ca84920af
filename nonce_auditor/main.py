"""
Command line entry point.

Usage:
    python -m nonce_auditor <gateway-addr> <address> [--network NAME]

Prints the candidates with a nonzero gateway nonce as one JSON line, e.g.:

    python -m nonce_auditor \\
        0xf5cAD0DB6415a71a5BC67403c87B56b629b4DdaA 0x7292694902bcaf4e1620629e7198cdcb3f572a24 \\
        --network mainnet
"""
import argparse
import asyncio
import logging
import sys
from typing import Any, List, Optional, Sequence, TextIO

from nonce_auditor.auditor import audit, fetch_nonce_results, filter_active, to_json
from nonce_auditor.candidates import DEFAULT_CANDIDATES, load_candidates
from nonce_auditor.config import LOG_FORMAT, LOG_LEVEL, RPC_HTTP, rpc_for_network
from nonce_auditor.errors import AuditError, MissingArgument, QueryError
from nonce_auditor.gateway import build_web3, resolve_gateway

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nonce_auditor",
        description="List candidate addresses with a nonzero gateway nonce.",
    )
    # Optional at the parser level so absence surfaces as MissingArgument
    parser.add_argument("gateway", nargs="?", help="Gateway contract address")
    parser.add_argument("address", nargs="?", help="Ethereum address (required, not used)")
    parser.add_argument("--network", help="Read the RPC URL from RPC_HTTP_<NETWORK>")
    parser.add_argument("--rpc", help="RPC endpoint URL (overrides --network)")
    parser.add_argument("--candidates", help="JSON file with the candidate addresses")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="Report nonzero nonces even if some candidates fail",
    )
    return parser


def _rpc_url(args: argparse.Namespace) -> str:
    if args.rpc:
        return args.rpc
    if args.network:
        return rpc_for_network(args.network)
    return RPC_HTTP


def _candidates(args: argparse.Namespace) -> Sequence[str]:
    if not args.candidates:
        return DEFAULT_CANDIDATES
    try:
        return load_candidates(args.candidates)
    except (OSError, ValueError) as e:
        raise AuditError(f"Cannot load candidates from {args.candidates}: {e}") from e


async def run(args: argparse.Namespace, w3: Optional[Any] = None, out: Optional[TextIO] = None) -> int:
    """
    Execute one audit run.

    Args:
        args: Parsed command line
        w3: AsyncWeb3 instance (default: built from --rpc/--network)
        out: Stream receiving the JSON line (default: stdout)

    Returns:
        Process exit code
    """
    if not args.gateway:
        raise MissingArgument("Expected the Ethereum address of the Gateway")
    if not args.address:
        raise MissingArgument("Expected an Ethereum address")

    out = out or sys.stdout
    candidates = _candidates(args)
    if w3 is None:
        rpc_url = _rpc_url(args)
        logger.info(f"Using RPC {rpc_url}")
        w3 = build_web3(rpc_url)

    gateway = await resolve_gateway(w3, args.gateway)

    if not args.keep_going:
        records = await audit(gateway, candidates)
        print(to_json(records), file=out, flush=True)
        return 0

    results = await fetch_nonce_results(gateway, candidates)
    records = []
    failed = 0
    for r in results:
        try:
            records.append(r.record())
        except QueryError as e:
            failed += 1
            logger.warning(str(e))
    print(to_json(filter_active(records)), file=out, flush=True)
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None, w3: Optional[Any] = None, out: Optional[TextIO] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args, w3=w3, out=out))
    except AuditError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
