"""Multicall3 aggregator handle.

Multicall3 is deployed at the same address on most EVM chains. Only the
``aggregate`` entry point is used: every call in the batch must succeed or
the whole eth_call reverts.
"""

from eth_typing import ChecksumAddress
from web3 import Web3

from .abi import ContractABI
from .builder import Caller
from .client import NetworkClient, Web3Client
from .contract import Contract
from .types import BytesLike

MULTICALL3_ADDRESS = "0xcA11bde05977b3631167028862bE2a173976CA11"

MULTICALL3_ABI = """[
    {
        "inputs": [
            {
                "components": [
                    {"internalType": "address", "name": "target", "type": "address"},
                    {"internalType": "bytes", "name": "callData", "type": "bytes"}
                ],
                "internalType": "struct Multicall3.Call[]",
                "name": "calls",
                "type": "tuple[]"
            }
        ],
        "name": "aggregate",
        "outputs": [
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"},
            {"internalType": "bytes[]", "name": "returnData", "type": "bytes[]"}
        ],
        "stateMutability": "payable",
        "type": "function"
    },
    {
        "inputs": [],
        "name": "getBlockNumber",
        "outputs": [
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"}
        ],
        "stateMutability": "view",
        "type": "function"
    }
]"""


class Multicall3:
    """Entry point for building batches against a Multicall3 deployment."""

    def __init__(self, address: BytesLike, client: NetworkClient):
        self.contract = Contract.create(
            address, ContractABI.from_json(MULTICALL3_ABI), client
        )

    @classmethod
    def from_web3(
        cls, w3: Web3, address: BytesLike = MULTICALL3_ADDRESS
    ) -> "Multicall3":
        return cls(address, Web3Client(w3))

    @property
    def address(self) -> ChecksumAddress:
        return self.contract.address

    @property
    def abi(self) -> ContractABI:
        return self.contract.abi

    @property
    def client(self) -> NetworkClient:
        return self.contract.client

    def new_caller(self) -> Caller:
        """Return an empty Caller bound to this aggregator."""
        return Caller(multicall=self)
