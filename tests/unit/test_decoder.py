"""
Unit tests for decode_calldata: prefix dispatch, result assembly and the
error taxonomy. Pure Python, no network access.
"""

import pytest

from gaszip_decoder import decode_calldata
from gaszip_decoder.core.chains import ChainRegistry
from gaszip_decoder.core.decoder import annotate_chain_ids
from gaszip_decoder.core.errors import (
    AddressLengthMismatch,
    DecodeError,
    DecodeErrorKind,
    EmptyCalldata,
    InvalidHexEncoding,
    MalformedChainTail,
)
from gaszip_decoder.core.models import ChainIdEntry, PayloadKind

ADDR_20 = "11" * 20


# --- Reference scenarios ---

def test_evm_deposit_to_base():
    decoded = decode_calldata("0x02" + ADDR_20 + "0036")
    assert decoded.kind is PayloadKind.EVM
    assert decoded.prefix == "0x02"
    assert decoded.destination.evm == "0x1111111111111111111111111111111111111111"
    assert decoded.chain_ids == (ChainIdEntry(id=54, name="Base Mainnet", native_id=8453),)
    assert decoded.leftover_hex is None


def test_self_deposit_to_two_chains():
    decoded = decode_calldata("0x01" + "0037" + "0038")
    assert decoded.kind is PayloadKind.SELF
    assert decoded.destination is None
    assert decoded.chain_ids == (
        ChainIdEntry(id=55, name="OP Mainnet", native_id=10),
        ChainIdEntry(id=56, name="Zora", native_id=7777777),
    )


def test_evm_address_one_byte_short():
    with pytest.raises(AddressLengthMismatch) as exc_info:
        decode_calldata("0x02" + "11" * 19)
    assert exc_info.value.kind is DecodeErrorKind.ADDRESS_LENGTH_MISMATCH


def test_empty_calldata():
    with pytest.raises(EmptyCalldata) as exc_info:
        decode_calldata("0x")
    assert exc_info.value.kind is DecodeErrorKind.EMPTY_CALLDATA


# --- Input validation ---

@pytest.mark.parametrize("bad", ["", "02" + ADDR_20, "0x021", "0xzz", "0X02" + ADDR_20])
def test_invalid_hex(bad):
    with pytest.raises(InvalidHexEncoding):
        decode_calldata(bad)


def test_non_string_input():
    with pytest.raises(InvalidHexEncoding):
        decode_calldata(None)


def test_errors_share_a_base_class():
    for calldata in ("0x", "0xzz", "0x02" + "11" * 5, "0x01003600"):
        with pytest.raises(DecodeError):
            decode_calldata(calldata)


def test_base_decode_error_is_abstract():
    with pytest.raises(TypeError):
        DecodeError("no kind")


def test_error_without_message_falls_back_to_kind():
    assert str(EmptyCalldata()) == "EmptyCalldata"


def test_odd_tail_after_fixed_address():
    with pytest.raises(MalformedChainTail) as exc_info:
        decode_calldata("0x02" + ADDR_20 + "003600")
    assert exc_info.value.kind is DecodeErrorKind.MALFORMED_CHAIN_TAIL


# --- Fixed-length families ---

@pytest.mark.parametrize("prefix,length", [("01", 0), ("02", 20), ("04", 32), ("06", 20)])
@pytest.mark.parametrize("k", [0, 1, 3])
def test_fixed_length_chain_count(prefix, length, k):
    ids = [54, 255, 65535][:k]
    calldata = "0x" + prefix + "ab" * length + "".join(f"{i:04x}" for i in ids)
    decoded = decode_calldata(calldata)
    assert decoded.chain_id_values == ids


@pytest.mark.parametrize(
    "address",
    [bytes(range(20)), b"\x00" * 20, b"\xff" * 20, bytes(range(200, 220))],
)
def test_evm_address_roundtrip(address):
    decoded = decode_calldata("0x02" + address.hex())
    assert bytes.fromhex(decoded.destination.evm[2:]) == address


def test_move_deposit():
    decoded = decode_calldata("0x04" + "cd" * 32 + "0153")
    assert decoded.kind is PayloadKind.MOVE
    assert decoded.destination.move == "0x" + "cd" * 32
    assert decoded.chain_ids[0].name == "Fuel"


def test_initia_deposit():
    decoded = decode_calldata("0x06" + ADDR_20 + "01c8")
    assert decoded.kind is PayloadKind.INITIA
    assert decoded.destination.initia_hex == "0x" + ADDR_20
    assert decoded.destination.initia.startswith("init1")
    assert decoded.chain_ids[0].name == "Initia"


def test_uppercase_hex_is_normalized_in_destination():
    decoded = decode_calldata("0x02" + "AB" * 20)
    assert decoded.destination.evm == "0x" + "ab" * 20
    assert decoded.raw == "0x02" + "AB" * 20


# --- Variable-length families ---

def test_solana_deposit_fast_path():
    decoded = decode_calldata("0x03" + "00" * 32 + "00f5")
    assert decoded.kind is PayloadKind.BASE58
    assert decoded.destination.solana_like is True
    assert decoded.destination.base58 == "1" * 32
    assert decoded.destination.base58_hex == "0x" + "00" * 32
    assert decoded.chain_ids == (ChainIdEntry(id=245, name="Solana", native_id=501474),)


def test_base58_non_solana_address():
    decoded = decode_calldata("0x03" + "aa" * 25 + "0036")
    assert decoded.destination.solana_like is False
    assert decoded.destination.base58_hex == "0x" + "aa" * 25
    assert decoded.chain_id_values == [54]


def test_xrp_deposit():
    decoded = decode_calldata("0x05" + "00" * 2 + "01" + "0179")
    assert decoded.kind is PayloadKind.XRP
    assert decoded.destination.xrp == "rrp"
    assert decoded.chain_ids == (ChainIdEntry(id=377, name="XRP", native_id=1000016),)


@pytest.mark.parametrize("length", [3, 4, 21, 22, 40])
def test_xrp_always_keeps_an_address_byte(length):
    decoded = decode_calldata("0x05" + "0036" * (length // 2) + "00" * (length % 2))
    assert len(bytes.fromhex(decoded.destination.xrp_hex[2:])) >= 1


# --- Unknown prefixes ---

@pytest.mark.parametrize("prefix", ["00", "07", "10", "ff"])
def test_unknown_prefix_never_raises(prefix):
    decoded = decode_calldata("0x" + prefix + "0036beef")
    assert decoded.kind is PayloadKind.UNKNOWN
    assert decoded.prefix == "0x" + prefix
    assert decoded.destination is None
    assert decoded.chain_ids == ()
    assert decoded.leftover == bytes.fromhex("0036beef")


def test_unknown_prefix_without_body():
    decoded = decode_calldata("0x07")
    assert decoded.kind is PayloadKind.UNKNOWN
    assert decoded.leftover_hex == "0x"
    assert decoded.leftover == b""


# --- Registry annotation ---

def test_unregistered_chain_id_keeps_id_only():
    decoded = decode_calldata("0x01" + "fffe")
    assert decoded.chain_ids == (ChainIdEntry(id=65534),)
    assert decoded.chain_ids[0].known is False


def test_custom_registry_is_used_for_annotation():
    registry = ChainRegistry({65534: ("Devnet", 31337)})
    decoded = decode_calldata("0x01" + "fffe" + "0036", registry=registry)
    assert decoded.chain_ids[0] == ChainIdEntry(id=65534, name="Devnet", native_id=31337)
    assert decoded.chain_ids[1] == ChainIdEntry(id=54)


def test_annotate_chain_ids_preserves_order_and_duplicates():
    entries = annotate_chain_ids([56, 54, 56])
    assert [e.id for e in entries] == [56, 54, 56]
    assert entries[0] == entries[2]


def test_decode_is_deterministic():
    calldata = "0x05" + "aa" * 20 + "0179"
    assert decode_calldata(calldata) == decode_calldata(calldata)
