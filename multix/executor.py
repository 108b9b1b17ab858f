"""Execution of a multicall batch.

Encodes every registered call, sends them through Multicall3 ``aggregate``
in one eth_call and decodes the return data back into the callers' outputs,
in registration order. Any failure aborts the batch: nothing is retried and
outputs after the failing call are left unwritten.
"""

import logging
from typing import TYPE_CHECKING, Optional, Sequence

from eth_typing import BlockIdentifier

from .errors import DecodingError, EncodingError, NetworkError
from .models import AggregateResult, Call, SubCall

if TYPE_CHECKING:
    from .multicall3 import Multicall3

logger = logging.getLogger(__name__)

AGGREGATE = "aggregate"


def encode_calls(sub_calls: Sequence[SubCall]) -> list[Call]:
    calls = []
    for i, sub_call in enumerate(sub_calls):
        try:
            calls.append(sub_call.encode())
        except EncodingError as exc:
            raise EncodingError(
                str(exc),
                index=i,
                target=sub_call.target,
                function_name=sub_call.function_name,
            ) from exc
    return calls


def decode_aggregate(
    multicall: "Multicall3", response: bytes, expected: int
) -> AggregateResult:
    block_number, return_data = multicall.abi.unpack(AGGREGATE, response)
    if len(return_data) != expected:
        raise DecodingError(
            f"aggregate returned {len(return_data)} results for {expected} calls"
        )
    return AggregateResult(block_number=block_number, return_data=tuple(return_data))


def aggregate(
    multicall: "Multicall3",
    sub_calls: Sequence[SubCall],
    block_identifier: Optional[BlockIdentifier] = None,
) -> int:
    """Run ``sub_calls`` through ``multicall`` and return the block number."""
    calls = encode_calls(sub_calls)
    payload = multicall.abi.pack(AGGREGATE, [call.as_abi_tuple() for call in calls])

    logger.debug(
        "aggregate: %d calls, %d bytes to %s",
        len(calls),
        len(payload),
        multicall.address,
    )
    try:
        response = multicall.client.call(multicall.address, payload, block_identifier)
    except NetworkError:
        raise
    except Exception as exc:
        raise NetworkError(
            f"aggregate call to {multicall.address} failed: {exc}"
        ) from exc

    result = decode_aggregate(multicall, response, len(sub_calls))
    logger.debug("aggregate: block %d", result.block_number)

    for i, (sub_call, data) in enumerate(zip(sub_calls, result.return_data)):
        try:
            sub_call.decode(data)
        except DecodingError as exc:
            raise DecodingError(
                str(exc),
                index=i,
                target=sub_call.target,
                function_name=sub_call.function_name,
            ) from exc
    return result.block_number
