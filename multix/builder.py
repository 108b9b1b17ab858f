"""Builder pattern for assembling a multicall batch."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from eth_typing import BlockIdentifier

from .abi import ContractABI
from .errors import BatchConsumedError
from .executor import aggregate
from .models import Output, SubCall
from .types import BytesLike, as_address

if TYPE_CHECKING:
    from .contract import Contract
    from .multicall3 import Multicall3


@dataclass
class Caller:
    """
    Fluent builder collecting the calls of one Multicall3 batch.

    Example:
        symbol, decimals = Output(str), Output(int)
        (multicall.new_caller()
            .add_by_abi(token, erc20, "symbol", symbol)
            .add_by_abi(token, erc20, "decimals", decimals)
            .aggregate())

    Registration never touches the network and never validates arguments;
    encoding and decoding errors surface from aggregate(). A Caller runs
    once: build a new one with Multicall3.new_caller() for the next batch.
    """

    multicall: "Multicall3"
    calls: list[SubCall] = field(default_factory=list)
    consumed: bool = field(default=False, init=False)

    def __len__(self) -> int:
        return len(self.calls)

    def add_by_abi(
        self,
        target: BytesLike,
        abi: ContractABI,
        function_name: str,
        output: Output,
        *args: Any,
    ) -> "Caller":
        """Register a call to ``function_name`` on ``target``, decoded into ``output``."""

        def pack(*call_args: Any) -> bytes:
            return abi.pack(function_name, *call_args)

        def unpack(out: Output, data: bytes) -> None:
            abi.unpack_into(out, function_name, data)

        self.calls.append(
            SubCall(
                target=as_address(target),
                function_name=function_name,
                pack=pack,
                unpack=unpack,
                args=args,
                output=output,
            )
        )
        return self

    def add(
        self,
        contract: "Contract",
        function_name: str,
        output: Output,
        *args: Any,
    ) -> "Caller":
        """Register a call on a Contract binding."""
        return self.add_by_abi(
            contract.address, contract.abi, function_name, output, *args
        )

    def aggregate(self, block_identifier: Optional[BlockIdentifier] = None) -> int:
        """
        Execute the batch in a single eth_call.

        Returns:
            The block number the calls were evaluated at

        Raises:
            EncodingError: If a call cannot be encoded (nothing is sent)
            NetworkError: If the eth_call fails or reverts
            DecodingError: If the response or a call's return data cannot be decoded
            BatchConsumedError: If this Caller was already executed
        """
        if self.consumed:
            raise BatchConsumedError(
                "caller already executed; use Multicall3.new_caller() for a new batch"
            )
        self.consumed = True
        return aggregate(self.multicall, self.calls, block_identifier)
