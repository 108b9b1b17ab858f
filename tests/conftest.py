"""Shared fixtures: an ERC20 ABI and a fake client speaking Multicall3."""

import pytest
from eth_abi import decode, encode

from multix import MULTICALL3_ADDRESS, ContractABI, Multicall3

ERC20_ABI = """[
    {"constant": true, "inputs": [], "name": "symbol", "outputs": [{"internalType": "string", "name": "", "type": "string"}], "stateMutability": "view", "type": "function"},
    {"constant": true, "inputs": [], "name": "decimals", "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}], "stateMutability": "view", "type": "function"},
    {"constant": true, "inputs": [{"internalType": "address", "name": "", "type": "address"}], "name": "balanceOf", "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}], "stateMutability": "view", "type": "function"},
    {"anonymous": false, "inputs": [{"indexed": true, "name": "from", "type": "address"}, {"indexed": true, "name": "to", "type": "address"}, {"indexed": false, "name": "value", "type": "uint256"}], "name": "Transfer", "type": "event"}
]"""

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
HOLDER = "0x" + "ab" * 20

AGGREGATE_SELECTOR = bytes.fromhex("252dba42")
SYMBOL_SELECTOR = bytes.fromhex("95d89b41")
DECIMALS_SELECTOR = bytes.fromhex("313ce567")
BALANCE_OF_SELECTOR = bytes.fromhex("70a08231")


class FakeClient:
    """Decodes an aggregate payload and answers each call via ``responder``."""

    def __init__(self, responder, block_number=19_000_000):
        self.responder = responder
        self.block_number = block_number
        self.requests = []

    def call(self, to, data, block_identifier=None):
        self.requests.append((to, data, block_identifier))
        assert data[:4] == AGGREGATE_SELECTOR
        (calls,) = decode(["(address,bytes)[]"], data[4:])
        return_data = [self.responder(target, call_data) for target, call_data in calls]
        return encode(["uint256", "bytes[]"], [self.block_number, return_data])


def erc20_responder(balances=None, symbol="USDC", decimals=6):
    """Answer symbol/decimals/balanceOf like an ERC20 token."""
    balances = balances or {}

    def respond(target, call_data):
        selector, args = call_data[:4], call_data[4:]
        if selector == SYMBOL_SELECTOR:
            return encode(["string"], [symbol])
        if selector == DECIMALS_SELECTOR:
            return encode(["uint8"], [decimals])
        if selector == BALANCE_OF_SELECTOR:
            (holder,) = decode(["address"], args)
            return encode(["uint256"], [balances.get(holder.lower(), 0)])
        raise AssertionError(f"unexpected selector {selector.hex()}")

    return respond


@pytest.fixture
def erc20():
    return ContractABI.from_json(ERC20_ABI)


@pytest.fixture
def fake_client():
    return FakeClient(erc20_responder({HOLDER.lower(): 1_000_000}))


@pytest.fixture
def multicall(fake_client):
    return Multicall3(MULTICALL3_ADDRESS, fake_client)
