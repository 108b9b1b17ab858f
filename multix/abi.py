"""Contract interface descriptors built from JSON ABI text.

A ContractABI indexes the ``function`` entries of a JSON ABI by name and
packs/unpacks calls with eth-abi. Tuple parameters are collapsed into their
canonical ``(t1,t2,...)`` form, and decoded addresses are checksummed the
way web3.py returns them.
"""

import json
from typing import Any

from eth_abi import decode, encode, is_encodable_type
from eth_abi import exceptions as abi_exceptions
from eth_utils import function_abi_to_4byte_selector, to_checksum_address
from eth_utils.abi import collapse_if_tuple

from .errors import DecodingError, EncodingError, InterfaceParseError
from .models import Output


def _param_types(params: list[dict]) -> list[str]:
    return [collapse_if_tuple(p) for p in params]


def _check_params(params: list) -> None:
    for p in params:
        if not isinstance(p, dict):
            raise TypeError(f"parameter must be an object, got {p!r}")
        if "components" in p:
            _check_params(p["components"])


def _normalize(param: dict, value: Any) -> Any:
    typ = param["type"]
    if typ.endswith("]"):
        inner = dict(param, type=typ[: typ.rindex("[")])
        return tuple(_normalize(inner, v) for v in value)
    if typ == "tuple":
        return tuple(_normalize(c, v) for c, v in zip(param["components"], value))
    if typ == "address":
        return to_checksum_address(value)
    return value


class ContractABI:
    """Parsed function table of a contract ABI.

    Overloaded functions are not distinguished: when a name appears more
    than once, the last definition wins.
    """

    def __init__(self, abi: list[dict]):
        if not isinstance(abi, list):
            raise InterfaceParseError(
                f"ABI must be a JSON list, got {type(abi).__name__}"
            )
        self.functions: dict[str, dict] = {}
        for entry in abi:
            if not isinstance(entry, dict):
                raise InterfaceParseError(f"ABI entry must be an object: {entry!r}")
            if entry.get("type", "function") != "function":
                continue
            fn = self._validate_function(entry)
            self.functions[fn["name"]] = fn

    @staticmethod
    def _validate_function(entry: dict) -> dict:
        entry = dict(entry)
        name = entry.get("name")
        if not isinstance(name, str) or not name:
            raise InterfaceParseError(f"function entry has no name: {entry!r}")
        for key in ("inputs", "outputs"):
            params = entry.setdefault(key, [])
            if not isinstance(params, list):
                raise InterfaceParseError(f"{name}: {key} must be a list")
            try:
                _check_params(params)
                types = _param_types(params)
            except (KeyError, TypeError, ValueError) as exc:
                raise InterfaceParseError(f"{name}: malformed {key}: {exc}") from exc
            for typ in types:
                if not is_encodable_type(typ):
                    raise InterfaceParseError(f"{name}: unknown ABI type {typ!r}")
        return entry

    @classmethod
    def from_json(cls, text: str) -> "ContractABI":
        """Parse JSON ABI text, raising InterfaceParseError if it is malformed."""
        try:
            abi = json.loads(text)
        except (TypeError, ValueError) as exc:
            raise InterfaceParseError(f"invalid ABI JSON: {exc}") from exc
        return cls(abi)

    def selector(self, name: str) -> bytes:
        """4-byte selector of ``name``."""
        fn = self.functions.get(name)
        if fn is None:
            raise EncodingError(f"function {name!r} not found in ABI")
        return function_abi_to_4byte_selector(fn)

    def pack(self, name: str, *args: Any) -> bytes:
        """Encode a call to ``name``: selector followed by the encoded arguments."""
        fn = self.functions.get(name)
        if fn is None:
            raise EncodingError(f"function {name!r} not found in ABI")
        types = _param_types(fn["inputs"])
        if len(args) != len(types):
            raise EncodingError(
                f"{name} expects {len(types)} arguments, got {len(args)}"
            )
        try:
            encoded = encode(types, list(args))
        except (abi_exceptions.EncodingError, TypeError, ValueError) as exc:
            raise EncodingError(f"cannot encode arguments for {name}: {exc}") from exc
        return function_abi_to_4byte_selector(fn) + encoded

    def unpack(self, name: str, data: bytes) -> tuple:
        """Decode the return data of ``name`` into a tuple of values."""
        fn = self.functions.get(name)
        if fn is None:
            raise DecodingError(f"function {name!r} not found in ABI")
        outputs = fn["outputs"]
        try:
            values = decode(_param_types(outputs), bytes(data))
        except (abi_exceptions.DecodingError, ValueError) as exc:
            raise DecodingError(f"cannot decode return data of {name}: {exc}") from exc
        return tuple(_normalize(p, v) for p, v in zip(outputs, values))

    def unpack_into(self, output: Output, name: str, data: bytes) -> None:
        """Decode return data of ``name`` and write it into ``output``.

        A single return value is written as is, several as a tuple and none
        as ``None``.
        """
        values = self.unpack(name, data)
        if len(values) == 1:
            output.set(values[0])
        elif values:
            output.set(values)
        else:
            output.set(None)
