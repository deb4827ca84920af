import pytest
from web3 import AsyncWeb3, Web3

from nonce_auditor.errors import ResolutionError
from nonce_auditor.gateway import GATEWAY_ABI, NONCES_SELECTOR, Gateway, build_web3, resolve_gateway

GATEWAY = "0xf5cad0db6415a71a5bc67403c87b56b629b4ddaa"
# Runtime code whose dispatcher compares against nonces(address) (PUSH4 0x7ecebe00)
GATEWAY_CODE = bytes.fromhex("6080604052348015600f57600080fd5b50637ecebe0014")
ACCOUNT = "0x620118ad98f2f2c02c823edf96555f8c6494c163"


@pytest.mark.asyncio
async def test_resolve_binds_checksummed_address(fake_web3):
    w3 = fake_web3(code={GATEWAY: GATEWAY_CODE})
    gateway = await resolve_gateway(w3, GATEWAY)
    assert isinstance(gateway, Gateway)
    assert gateway.address == Web3.to_checksum_address(GATEWAY)
    assert gateway.contract.abi == GATEWAY_ABI


@pytest.mark.asyncio
async def test_resolve_without_code_fails(fake_web3):
    w3 = fake_web3(code={})
    with pytest.raises(ResolutionError):
        await resolve_gateway(w3, GATEWAY)


@pytest.mark.asyncio
async def test_resolve_code_without_nonces_fails(fake_web3):
    w3 = fake_web3(code={GATEWAY: b"\x60\x80\x60\x40"}, nonces={ACCOUNT: 4})
    with pytest.raises(ResolutionError, match="nonces"):
        await resolve_gateway(w3, GATEWAY)
    assert w3.accounts == []


@pytest.mark.asyncio
async def test_resolve_malformed_address_fails_offline(fake_web3):
    w3 = fake_web3(code={GATEWAY: GATEWAY_CODE})
    with pytest.raises(ResolutionError):
        await resolve_gateway(w3, "0x1234")
    assert w3.calls == 0


@pytest.mark.asyncio
async def test_resolve_rpc_error_is_wrapped(fake_web3):
    w3 = fake_web3(code_error=ConnectionError("connection refused"))
    with pytest.raises(ResolutionError) as exc_info:
        await resolve_gateway(w3, GATEWAY)
    assert isinstance(exc_info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_nonces_passes_checksummed_account(fake_web3):
    w3 = fake_web3(code={GATEWAY: GATEWAY_CODE}, nonces={ACCOUNT: 4})
    gateway = await resolve_gateway(w3, GATEWAY)
    assert await gateway.nonces(ACCOUNT) == 4
    assert w3.accounts == [Web3.to_checksum_address(ACCOUNT)]


def test_gateway_abi_declares_nonces():
    (entry,) = GATEWAY_ABI
    assert entry["name"] == "nonces"
    assert [i["type"] for i in entry["inputs"]] == ["address"]
    assert [o["type"] for o in entry["outputs"]] == ["uint256"]


def test_build_web3_uses_endpoint():
    w3 = build_web3("http://localhost:8545", timeout=5)
    assert isinstance(w3, AsyncWeb3)
    assert w3.provider.endpoint_uri == "http://localhost:8545"


def test_nonces_selector():
    assert NONCES_SELECTOR == bytes.fromhex("7ecebe00")
