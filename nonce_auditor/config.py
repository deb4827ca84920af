"""Configuration constants for the nonce auditor."""
import os
from dotenv import load_dotenv

load_dotenv()

RPC_HTTP: str = os.getenv("RPC_HTTP", "http://127.0.0.1:8545")
RPC_TIMEOUT: float = float(os.getenv("RPC_TIMEOUT", "30"))  # seconds, per request

# Explorer used to regenerate candidate lists
ETHERSCAN_API_URL: str = os.getenv("ETHERSCAN_API_URL", "https://api.etherscan.io/api")
ETHERSCAN_API_KEY: str = os.getenv("ETHERSCAN_API_KEY", "")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s [NONCES] %(message)s"


def rpc_for_network(network: str) -> str:
    """
    Resolve the RPC endpoint for a named network.

    Args:
        network: Network name, e.g. "mainnet" or "rinkeby"

    Returns:
        Value of RPC_HTTP_<NETWORK>, or RPC_HTTP when unset
    """
    return os.getenv(f"RPC_HTTP_{network.upper()}", RPC_HTTP)
