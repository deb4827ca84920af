import asyncio

import pytest


class FakeGateway:
    """Stands in for a resolved Gateway handle."""

    def __init__(self, nonces, failures=(), delays=None):
        self.values = dict(nonces)
        self.failures = set(failures)
        self.delays = delays or {}
        self.calls = []
        self.in_flight = 0
        self.peak = 0

    async def nonces(self, address):
        self.calls.append(address)
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delays.get(address, 0))
        finally:
            self.in_flight -= 1
        if address in self.failures:
            raise ConnectionError(f"execution reverted for {address}")
        return self.values[address]


class _Call:
    def __init__(self, w3, account):
        self.w3 = w3
        self.account = account

    async def call(self):
        self.w3.calls += 1
        self.w3.accounts.append(self.account)
        key = self.account.lower()
        if key in self.w3.failures:
            raise ValueError("execution reverted")
        return self.w3.values.get(key, 0)


class _Functions:
    def __init__(self, w3):
        self.w3 = w3

    def nonces(self, account):
        return _Call(self.w3, account)


class FakeContract:
    def __init__(self, w3, address, abi):
        self.address = address
        self.abi = abi
        self.functions = _Functions(w3)


class _Eth:
    def __init__(self, w3):
        self.w3 = w3

    async def get_code(self, address):
        self.w3.calls += 1
        if self.w3.code_error is not None:
            raise self.w3.code_error
        return self.w3.code.get(address.lower(), b"")

    def contract(self, address, abi):
        return FakeContract(self.w3, address, abi)


class FakeWeb3:
    """Minimal AsyncWeb3 double; counts every network round trip in ``calls``."""

    def __init__(self, code=None, nonces=None, failures=(), code_error=None):
        self.code = {k.lower(): v for k, v in (code or {}).items()}
        self.values = {k.lower(): v for k, v in (nonces or {}).items()}
        self.failures = {f.lower() for f in failures}
        self.code_error = code_error
        self.calls = 0
        self.accounts = []
        self.eth = _Eth(self)


@pytest.fixture
def fake_gateway():
    return FakeGateway


@pytest.fixture
def fake_web3():
    return FakeWeb3
