"""Candidate list regeneration from a block explorer (Etherscan txlist)."""
import argparse
import json
import logging
import sys
from typing import List, Optional

import requests

from nonce_auditor.config import ETHERSCAN_API_KEY, ETHERSCAN_API_URL, LOG_FORMAT, LOG_LEVEL
from nonce_auditor.errors import ExplorerError

logger = logging.getLogger(__name__)


def fetch_candidates(
    address: str,
    api_key: str = ETHERSCAN_API_KEY,
    api_url: str = ETHERSCAN_API_URL,
    timeout: float = 15,
) -> List[str]:
    """
    Collect the distinct senders of transactions to an address.

    Args:
        address: Address whose transaction list is scanned
        api_key: Explorer API key
        api_url: Explorer API endpoint
        timeout: HTTP timeout (seconds)

    Returns:
        Lowercase sender addresses in first-seen order (oldest first)
    """
    params = {
        "module": "account",
        "action": "txlist",
        "address": address,
        "startblock": 0,
        "endblock": 99999999,
        "sort": "asc",
        "apikey": api_key,
    }

    try:
        response = requests.get(api_url, params=params, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as e:
        raise ExplorerError(f"txlist request for {address} failed: {e}") from e

    if data.get("status") != "1":
        # Etherscan reports an empty history as status 0
        if data.get("message") == "No transactions found":
            return []
        raise ExplorerError(f"txlist for {address}: {data.get('message')} {data.get('result')}")

    senders: List[str] = []
    seen = set()
    for tx in data.get("result", []):
        sender = (tx.get("from") or "").lower()
        if sender and sender not in seen:
            seen.add(sender)
            senders.append(sender)

    logger.info(f"{len(senders)} distinct senders in {len(data.get('result', []))} transactions to {address}")
    return senders


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)
    parser = argparse.ArgumentParser(
        prog="nonce_auditor.explorer",
        description="Write the senders of an address's transactions as a candidate list.",
    )
    parser.add_argument("address", help="Address whose transactions are scanned")
    parser.add_argument("--out", help="Output file (default: stdout)")
    args = parser.parse_args(argv)

    try:
        senders = fetch_candidates(args.address)
    except ExplorerError as e:
        logger.error(str(e))
        return 1

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(senders, f, indent=2)
        logger.info(f"Wrote {len(senders)} candidates to {args.out}")
    else:
        print(json.dumps(senders))
    return 0


if __name__ == "__main__":
    sys.exit(main())
