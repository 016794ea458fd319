"""
Unit tests for CSV export: row building, ETH formatting and the streamed
export loop (with a fake HyperSync client).
"""

import csv
import io
import json

import pytest

from gaszip_decoder.stream.config import FetchConfig
from gaszip_decoder.stream.export import (
    CSV_HEADER,
    ExportStats,
    build_row,
    export_transactions,
    format_eth,
    format_timestamp,
    write_rows,
)
from gaszip_decoder.stream.hypersync import QueryPage

EVM_INPUT = "0x02" + "11" * 20 + "0036"


def _tx(input_hex="0x", value="0x0", n=1):
    return {
        "block_number": 100 + n,
        "transaction_index": n,
        "hash": f"0x{n:064x}",
        "from": "0xsender",
        "to": "0x391e7c679d29bd940d63be94ad22a25d25b5a604",
        "input": input_hex,
        "value": value,
    }


class FakeClient:
    def __init__(self, pages):
        self.pages = pages
        self.queries = []

    def stream_pages(self, query):
        self.queries.append(query)
        yield from self.pages


# --- format helpers ---

@pytest.mark.parametrize(
    "wei,expected",
    [
        (None, ""),
        (0, "0"),
        (1, "0.000000000000000001"),
        (10**18, "1"),
        (1_500_000_000_000_000_000, "1.5"),
        (123 * 10**18 + 456, "123.000000000000000456"),
    ],
)
def test_format_eth(wei, expected):
    assert format_eth(wei) == expected


def test_format_timestamp():
    assert format_timestamp("0x64") == "100"
    assert format_timestamp(1700000000) == "1700000000"
    assert format_timestamp(None) == ""


# --- build_row ---

def test_build_row_evm_deposit():
    row = build_row(_tx(EVM_INPUT, value="0xde0b6b3a7640000"), "0x6553f100")
    assert row["decode_type"] == "EVM"
    assert row["prefix"] == "0x02"
    assert row["dest_evm"] == "0x" + "11" * 20
    assert row["value_wei"] == str(10**18)
    assert row["value_eth"] == "1"
    assert row["timestamp"] == "1700000000"
    assert json.loads(row["chain_ids"]) == [{"id": 54, "name": "Base Mainnet", "nativeId": 8453}]
    assert row["decode_error"] == ""
    assert list(row) == CSV_HEADER


def test_build_row_chain_ids_json_is_compact():
    row = build_row(_tx("0x01" + "fffe"))
    assert row["chain_ids"] == '[{"id":65534}]'


def test_build_row_value_transfer_has_blank_decode_columns():
    row = build_row(_tx("0x", value="0x10"))
    assert row["input"] == "0x"
    assert row["decode_type"] == ""
    assert row["chain_ids"] == ""
    assert row["value_wei"] == "16"


def test_build_row_missing_input_treated_as_empty():
    tx = _tx()
    del tx["input"]
    row = build_row(tx)
    assert row["input"] == "0x"
    assert row["decode_type"] == ""


def test_build_row_records_decode_error():
    row = build_row(_tx("0x02" + "11" * 19))
    assert row["decode_type"] == "DECODE_ERROR"
    assert "too short" in row["decode_error"]
    assert row["dest_evm"] == ""


def test_build_row_solana_columns():
    row = build_row(_tx("0x03" + "00" * 32 + "00f5"))
    assert row["decode_type"] == "BASE58"
    assert row["dest_base58"] == "1" * 32
    assert row["dest_base58_hex"] == "0x" + "00" * 32
    assert row["dest_solana_like"] == "true"


def test_build_row_non_solana_base58_leaves_flag_blank():
    row = build_row(_tx("0x03" + "aa" * 25 + "0036"))
    assert row["dest_solana_like"] == ""


def test_build_row_xrp_and_initia_columns():
    xrp = build_row(_tx("0x05" + "000001" + "0179"))
    assert xrp["dest_xrp"] == "rrp"

    initia = build_row(_tx("0x06" + "11" * 20 + "01c8"))
    assert initia["dest_initia"].startswith("init1")
    assert initia["dest_initia_hex"] == "0x" + "11" * 20


def test_build_row_move_and_unknown():
    move = build_row(_tx("0x04" + "cd" * 32))
    assert move["dest_move"] == "0x" + "cd" * 32

    unknown = build_row(_tx("0x09beef"))
    assert unknown["decode_type"] == "UNKNOWN"
    assert unknown["chain_ids"] == "[]"


def test_build_row_bad_value_is_blank():
    row = build_row(_tx(value="not-a-number"))
    assert row["value_wei"] == ""
    assert row["value_eth"] == ""


# --- write_rows ---

def test_write_rows_counts_and_continues_after_errors():
    stream = io.StringIO()
    stats = ExportStats()
    txs = [
        (_tx(EVM_INPUT, value="0x1", n=1), None),
        (_tx("0xzz", value="0x2", n=2), None),
        (_tx("0x", value="0x3", n=3), None),
        (_tx("0x01", n=4), None),
    ]
    assert write_rows(stream, txs, stats) is True

    rows = list(csv.DictReader(io.StringIO(",".join(CSV_HEADER) + "\n" + stream.getvalue())))
    assert [r["decode_type"] for r in rows] == ["EVM", "DECODE_ERROR", "", "SELF"]
    assert stats.total == 4
    assert stats.decoded_ok == 2
    assert stats.decoded_err == 1
    assert stats.value_wei == 6


def test_write_rows_stops_at_limit():
    stream = io.StringIO()
    stats = ExportStats()
    txs = [(_tx(EVM_INPUT, n=i), None) for i in range(5)]
    assert write_rows(stream, txs, stats, limit=3) is False
    assert stats.total == 3
    assert stats.stopped_at_limit is True
    assert len(stream.getvalue().splitlines()) == 3


def test_csv_quotes_json_chain_ids():
    stream = io.StringIO()
    write_rows(stream, [(_tx("0x01" + "0037" + "0038"), None)], ExportStats())
    line = stream.getvalue().strip()
    assert '"[{""id"":55' in line


# --- export_transactions ---

def test_export_transactions_writes_header_and_rows(tmp_path):
    out = tmp_path / "nested" / "decoded.csv"
    page = QueryPage(
        transactions=[_tx(EVM_INPUT, value="0xde0b6b3a7640000", n=1), _tx("0x", n=2)],
        blocks={101: {"number": 101, "timestamp": "0x64"}},
        next_block=200,
    )
    client = FakeClient([page])
    config = FetchConfig(url="https://x", out=str(out), from_block=5)

    stats = export_transactions(client, config)

    assert client.queries[0]["from_block"] == 5
    with open(out, newline="") as fh:
        rows = list(csv.DictReader(fh))
    assert len(rows) == 2
    assert rows[0]["timestamp"] == "100"
    assert rows[0]["block_number"] == "101"
    assert rows[1]["timestamp"] == ""
    assert stats.total == 2
    assert stats.decoded_ok == 1
    assert stats.value_eth == "1"
    assert stats.summary(str(out)).startswith(f"Done. Wrote {out}. Transactions: 2")


def test_export_transactions_limit_across_pages(tmp_path):
    out = tmp_path / "decoded.csv"
    pages = [
        QueryPage(transactions=[_tx(EVM_INPUT, n=i) for i in range(3)], next_block=10),
        QueryPage(transactions=[_tx(EVM_INPUT, n=i) for i in range(3, 6)], next_block=20),
    ]
    config = FetchConfig(url="https://x", out=str(out), limit=4)

    stats = export_transactions(FakeClient(pages), config)

    assert stats.total == 4
    assert stats.stopped_at_limit is True
    assert stats.summary(str(out), 4).startswith("Stopped early at limit=4.")
    with open(out, newline="") as fh:
        assert len(list(csv.DictReader(fh))) == 4
