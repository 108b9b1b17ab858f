"""
multix - Multicall3 batching for web3.py

Batches several read-only contract calls into one eth_call through the
Multicall3 aggregator and decodes each result into a caller-supplied Output.
"""

import logging

from .abi import ContractABI
from .builder import Caller
from .client import NetworkClient, Web3Client
from .contract import Contract
from .errors import (
    BatchConsumedError,
    DecodingError,
    EncodingError,
    InterfaceParseError,
    MulticallError,
    NetworkError,
)
from .models import AggregateResult, Call, Output, SubCall
from .multicall3 import MULTICALL3_ABI, MULTICALL3_ADDRESS, Multicall3
from .types import BytesLike, as_address, as_bytes

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AggregateResult",
    "BatchConsumedError",
    "BytesLike",
    "Call",
    "Caller",
    "Contract",
    "ContractABI",
    "DecodingError",
    "EncodingError",
    "InterfaceParseError",
    "MULTICALL3_ABI",
    "MULTICALL3_ADDRESS",
    "Multicall3",
    "MulticallError",
    "NetworkClient",
    "NetworkError",
    "Output",
    "SubCall",
    "Web3Client",
    "as_address",
    "as_bytes",
]
