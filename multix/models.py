"""Data models for multicall batches."""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from eth_typing import ChecksumAddress

from .errors import DecodingError

T = TypeVar("T")


@dataclass
class Output(Generic[T]):
    """
    Write target for a decoded return value.

    Example:
        balance = Output(int)
        caller.add_by_abi(token, erc20, "balanceOf", balance, holder)
        caller.aggregate()
        print(balance.value)

    If ``expected`` is given, a decoded value of another type is rejected
    with DecodingError and the slot is left untouched.
    """

    expected: Optional[type] = None
    value: Optional[T] = field(default=None, init=False)
    is_set: bool = field(default=False, init=False)

    def set(self, value: Any) -> None:
        if self.expected is not None and not isinstance(value, self.expected):
            raise DecodingError(
                f"expected {self.expected.__name__}, got {type(value).__name__}"
            )
        self.value = value
        self.is_set = True


@dataclass(frozen=True)
class Call:
    """Target and call data of one entry in an aggregate call."""

    target: ChecksumAddress
    call_data: bytes

    def as_abi_tuple(self) -> tuple[str, bytes]:
        return (self.target, self.call_data)


@dataclass(frozen=True)
class SubCall:
    """A registered call whose encoding and decoding are deferred."""

    target: ChecksumAddress
    function_name: str
    pack: Callable[..., bytes]
    unpack: Callable[[Output, bytes], None]
    args: tuple
    output: Output

    def encode(self) -> Call:
        return Call(target=self.target, call_data=self.pack(*self.args))

    def decode(self, data: bytes) -> None:
        self.unpack(self.output, data)


@dataclass(frozen=True)
class AggregateResult:
    """Block number and per-call return data of an aggregate call."""

    block_number: int
    return_data: tuple[bytes, ...]
