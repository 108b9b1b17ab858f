"""Type definitions and coercion helpers for multicall batches."""

from typing import Union

from eth_typing import ChecksumAddress
from eth_utils import to_bytes, to_checksum_address

BytesLike = Union[bytes, str]


def as_bytes(value: BytesLike) -> bytes:
    """Convert hex string, bytes, bytearray, or memoryview to bytes."""
    if isinstance(value, str):
        if value == "" or value == "0x":
            return b""
        return to_bytes(hexstr=value)
    return bytes(value)


def as_address(value: BytesLike) -> ChecksumAddress:
    """Convert hex string or bytes to a checksummed 20-byte address."""
    if isinstance(value, str):
        b = to_bytes(hexstr=value)
    else:
        b = bytes(value)

    if len(b) != 20:
        raise ValueError(f"address must be 20 bytes, got {len(b)}")
    return to_checksum_address(b)
