"""Tests for the data models."""

import pytest

from multix import Call, DecodingError, Output, SubCall, as_address


class TestOutput:
    """Test Output write targets."""

    def test_starts_unset(self):
        out = Output()
        assert out.value is None
        assert not out.is_set

    def test_set(self):
        out = Output(str)
        out.set("USDC")
        assert out.value == "USDC"
        assert out.is_set

    def test_untyped_accepts_anything(self):
        out = Output()
        out.set((1, "a"))
        assert out.value == (1, "a")

    def test_rejects_wrong_type(self):
        out = Output(str)
        with pytest.raises(DecodingError, match="expected str, got int"):
            out.set(6)
        assert not out.is_set
        assert out.value is None


class TestCall:
    """Test the raw (target, call data) pair."""

    def test_as_abi_tuple(self):
        target = as_address("0x" + "a" * 40)
        call = Call(target=target, call_data=b"\x01\x02")
        assert call.as_abi_tuple() == (target, b"\x01\x02")


class TestSubCall:
    """Test deferred encode/decode of a registered call."""

    def test_encode_passes_stored_args(self):
        target = as_address("0x" + "a" * 40)
        seen = []

        def pack(*args):
            seen.append(args)
            return b"\xaa"

        sub_call = SubCall(
            target=target,
            function_name="f",
            pack=pack,
            unpack=lambda out, data: out.set(data),
            args=(1, "x"),
            output=Output(),
        )

        assert sub_call.encode() == Call(target=target, call_data=b"\xaa")
        assert seen == [(1, "x")]

    def test_decode_writes_output(self):
        out = Output()
        sub_call = SubCall(
            target=as_address("0x" + "a" * 40),
            function_name="f",
            pack=lambda: b"",
            unpack=lambda o, data: o.set(data[::-1]),
            args=(),
            output=out,
        )

        sub_call.decode(b"\x01\x02")

        assert out.value == b"\x02\x01"
