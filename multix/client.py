"""Network clients able to issue a read-only eth_call."""

from typing import Optional, Protocol

from eth_typing import BlockIdentifier, ChecksumAddress
from web3 import Web3

from .types import as_bytes


class NetworkClient(Protocol):
    """Anything that can run an eth_call and return the raw result bytes."""

    def call(
        self,
        to: ChecksumAddress,
        data: bytes,
        block_identifier: Optional[BlockIdentifier] = None,
    ) -> bytes: ...


class Web3Client:
    """NetworkClient backed by a web3.py ``Web3`` instance.

    Timeouts and retries are whatever the underlying provider is configured
    with, e.g. ``Web3.HTTPProvider(url, request_kwargs={"timeout": 10})``.
    """

    def __init__(self, w3: Web3):
        self.w3 = w3

    @classmethod
    def from_url(cls, rpc_url: str, timeout: Optional[float] = None) -> "Web3Client":
        request_kwargs = {"timeout": timeout} if timeout is not None else None
        return cls(Web3(Web3.HTTPProvider(rpc_url, request_kwargs=request_kwargs)))

    def call(
        self,
        to: ChecksumAddress,
        data: bytes,
        block_identifier: Optional[BlockIdentifier] = None,
    ) -> bytes:
        result = self.w3.eth.call({"to": to, "data": data}, block_identifier)
        return as_bytes(result)
