"""Contract bindings: an address, its ABI and the client used to reach it."""

from dataclasses import dataclass

from eth_typing import ChecksumAddress

from .abi import ContractABI
from .client import NetworkClient
from .types import BytesLike, as_address


@dataclass(frozen=True)
class Contract:
    """Deployed contract reachable through ``client``."""

    address: ChecksumAddress
    abi: ContractABI
    client: NetworkClient

    @classmethod
    def create(
        cls,
        address: BytesLike,
        abi: ContractABI,
        client: NetworkClient,
    ) -> "Contract":
        """Create a Contract with automatic address coercion."""
        return cls(address=as_address(address), abi=abi, client=client)

    @classmethod
    def from_json(
        cls,
        address: BytesLike,
        abi_json: str,
        client: NetworkClient,
    ) -> "Contract":
        """Create a Contract from raw ABI JSON text.

        Raises:
            InterfaceParseError: If the ABI text is malformed
        """
        return cls.create(address, ContractABI.from_json(abi_json), client)
