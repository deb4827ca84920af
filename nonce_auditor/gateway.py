"""Gateway contract resolution."""
import logging
from typing import Any, Dict, List

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3

from nonce_auditor.config import RPC_TIMEOUT
from nonce_auditor.errors import ResolutionError

logger = logging.getLogger(__name__)

GATEWAY_ABI: List[Dict[str, Any]] = [
    {
        "constant": True,
        "inputs": [{"name": "", "type": "address"}],
        "name": "nonces",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    }
]

# Dispatcher selector for nonces(address); must appear in the runtime code
NONCES_SELECTOR: bytes = bytes(Web3.keccak(text="nonces(address)")[:4])


class Gateway:
    """Read-only handle on a deployed gateway contract."""

    def __init__(self, contract: Any):
        self.contract = contract
        self.address: str = contract.address

    async def nonces(self, address: str) -> int:
        # web3 only encodes checksummed address arguments
        account = Web3.to_checksum_address(address)
        return int(await self.contract.functions.nonces(account).call())


def build_web3(rpc_url: str, timeout: float = RPC_TIMEOUT) -> AsyncWeb3:
    """
    Create an async web3 client for an HTTP endpoint.

    Args:
        rpc_url: RPC endpoint URL
        timeout: Total timeout for each request (seconds)

    Returns:
        AsyncWeb3 instance
    """
    provider = AsyncHTTPProvider(
        rpc_url,
        request_kwargs={"timeout": aiohttp.ClientTimeout(total=timeout)},
        exception_retry_configuration=None,
    )
    return AsyncWeb3(provider)


async def resolve_gateway(w3: AsyncWeb3, address: str) -> Gateway:
    """
    Bind a Gateway handle to a deployed contract address.

    Args:
        w3: AsyncWeb3 instance
        address: Gateway contract address

    Returns:
        Gateway handle

    Raises:
        ResolutionError: malformed address, RPC failure, no code deployed
            or code without a nonces(address) entry point
    """
    try:
        checksum = Web3.to_checksum_address(address)
    except (ValueError, TypeError) as e:
        raise ResolutionError(f"Invalid gateway address {address!r}: {e}") from e

    try:
        code = await w3.eth.get_code(checksum)
    except Exception as e:
        raise ResolutionError(f"Cannot fetch code for gateway {checksum}: {e}") from e

    if not code:
        raise ResolutionError(f"No contract deployed at {checksum}")
    if NONCES_SELECTOR not in bytes(code):
        raise ResolutionError(f"Contract at {checksum} has no nonces(address) function")

    logger.debug(f"Gateway {checksum} resolved ({len(code)} bytes of code)")
    contract = w3.eth.contract(address=checksum, abi=GATEWAY_ABI)
    return Gateway(contract)
