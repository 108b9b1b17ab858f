"""
Exception hierarchy for multicall batches.

Every failure during a batch surfaces as a subclass of MulticallError.
Per-call errors carry the index, target and function name of the sub-call
that failed so a caller can tell which registration was at fault.
"""

from typing import Optional


class MulticallError(Exception):
    """Base exception for multicall operations."""
    pass


class InterfaceParseError(MulticallError, ValueError):
    """Raised when ABI JSON text cannot be parsed into an interface."""
    pass


class _CallError(MulticallError):
    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        target: Optional[str] = None,
        function_name: Optional[str] = None,
    ):
        if index is not None:
            message = f"call {index} ({function_name} on {target}): {message}"
        super().__init__(message)
        self.index = index
        self.target = target
        self.function_name = function_name


class EncodingError(_CallError):
    """Raised when a call's arguments cannot be packed against its ABI."""
    pass


class DecodingError(_CallError):
    """Raised when return data does not match the declared outputs."""
    pass


class NetworkError(MulticallError):
    """Raised when the aggregate eth_call fails (transport error or revert)."""
    pass


class BatchConsumedError(MulticallError, RuntimeError):
    """Raised when a caller that already executed is executed again."""
    pass
