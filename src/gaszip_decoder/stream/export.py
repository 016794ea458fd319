"""
Decode Gas.zip deposit transactions and write them to CSV, one row per
transaction. Decode failures are recorded in the row, never raised.
"""

from __future__ import annotations

import csv
import json
import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, TextIO

from gaszip_decoder.core.decoder import decode_calldata
from gaszip_decoder.core.errors import DecodeError
from gaszip_decoder.core.models import (
    Base58Destination,
    EvmDestination,
    InitiaDestination,
    MoveDestination,
    XrpDestination,
)
from gaszip_decoder.stream.config import FetchConfig
from gaszip_decoder.stream.hypersync import HypersyncClient, build_query, to_int

logger = logging.getLogger("gaszip_decoder.export")

WEI_PER_ETH = 10**18
DECODE_ERROR_TYPE = "DECODE_ERROR"

CSV_HEADER = [
    "block_number",
    "timestamp",
    "tx_index",
    "tx_hash",
    "from",
    "to",
    "input",
    "value_wei",
    "value_eth",
    "decode_type",
    "prefix",
    "dest_evm",
    "dest_move",
    "dest_base58",
    "dest_base58_hex",
    "dest_solana_like",
    "dest_xrp",
    "dest_initia",
    "dest_initia_hex",
    "chain_ids",
    "decode_error",
]


@dataclass
class ExportStats:
    """Counters reported at the end of an export run."""
    total: int = 0
    decoded_ok: int = 0
    decoded_err: int = 0
    value_wei: int = 0
    stopped_at_limit: bool = False

    @property
    def value_eth(self) -> str:
        return format_eth(self.value_wei)

    def summary(self, out: str, limit: int | None = None) -> str:
        counts = (
            f"Transactions: {self.total}, decoded: {self.decoded_ok}, "
            f"errors: {self.decoded_err}, cumulative_value_eth: {self.value_eth}"
        )
        if self.stopped_at_limit:
            return f"Stopped early at limit={limit}. Wrote {out}. {counts}"
        return f"Done. Wrote {out}. {counts}"


def format_eth(wei: int | None) -> str:
    """Exact wei -> ETH decimal string with trailing zeros trimmed."""
    if wei is None:
        return ""
    whole, frac = divmod(wei, WEI_PER_ETH)
    frac_str = str(frac).rjust(18, "0").rstrip("0")
    return f"{whole}.{frac_str}" if frac_str else str(whole)


def format_timestamp(raw: Any) -> str:
    """HyperSync block timestamps may be hex quantities; render as decimal."""
    if raw is None:
        return ""
    if isinstance(raw, str) and raw.startswith("0x"):
        return str(int(raw, 16))
    return str(raw)


def _parse_value(raw: Any) -> int | None:
    try:
        return to_int(raw)
    except ValueError:
        return None


def build_row(tx: dict[str, Any], block_timestamp: Any = None) -> dict[str, str]:
    """
    Build one CSV row for a transaction.

    Empty ("0x") inputs are plain value transfers and keep the decode
    columns blank. Inputs that fail to decode get decode_type DECODE_ERROR
    and the error text in decode_error.
    """
    tx_input = tx.get("input") or "0x"
    value_wei = _parse_value(tx.get("value"))

    row: dict[str, str] = {name: "" for name in CSV_HEADER}
    row.update({
        "block_number": _text(tx.get("block_number")),
        "timestamp": format_timestamp(block_timestamp),
        "tx_index": _text(tx.get("transaction_index")),
        "tx_hash": _text(tx.get("hash")),
        "from": _text(tx.get("from")),
        "to": _text(tx.get("to")),
        "input": tx_input,
        "value_wei": "" if value_wei is None else str(value_wei),
        "value_eth": format_eth(value_wei),
    })

    if tx_input == "0x":
        return row

    try:
        decoded = decode_calldata(tx_input)
    except DecodeError as e:
        logger.warning(f"Failed to decode input of {row['tx_hash']}: {e}")
        row["decode_type"] = DECODE_ERROR_TYPE
        row["decode_error"] = str(e)
        return row

    row["decode_type"] = decoded.kind.value
    row["prefix"] = decoded.prefix
    row["chain_ids"] = json.dumps(
        [entry.to_json() for entry in decoded.chain_ids],
        separators=(",", ":"),
        ensure_ascii=False,
    )

    dest = decoded.destination
    if isinstance(dest, EvmDestination):
        row["dest_evm"] = dest.evm
    elif isinstance(dest, MoveDestination):
        row["dest_move"] = dest.move
    elif isinstance(dest, Base58Destination):
        row["dest_base58"] = dest.base58 or ""
        row["dest_base58_hex"] = dest.base58_hex
        row["dest_solana_like"] = "true" if dest.solana_like else ""
    elif isinstance(dest, XrpDestination):
        row["dest_xrp"] = dest.xrp or ""
    elif isinstance(dest, InitiaDestination):
        row["dest_initia"] = dest.initia or ""
        row["dest_initia_hex"] = dest.initia_hex
    return row


def write_rows(
    stream: TextIO,
    transactions: Iterable[tuple[dict[str, Any], Any]],
    stats: ExportStats,
    limit: int | None = None,
) -> bool:
    """
    Write (tx, block_timestamp) pairs to ``stream`` as CSV rows.

    Returns False once ``limit`` transactions have been written.
    """
    writer = csv.DictWriter(stream, fieldnames=CSV_HEADER, lineterminator="\n")
    for tx, block_timestamp in transactions:
        if limit and stats.total >= limit:
            stats.stopped_at_limit = True
            return False

        row = build_row(tx, block_timestamp)
        stats.total += 1
        if row["value_wei"]:
            stats.value_wei += int(row["value_wei"])
        if row["decode_type"] == DECODE_ERROR_TYPE:
            stats.decoded_err += 1
        elif row["decode_type"]:
            stats.decoded_ok += 1
        writer.writerow(row)
    return True


def export_transactions(client: HypersyncClient, config: FetchConfig) -> ExportStats:
    """
    Stream every transaction sent to ``config.contract`` and write the
    decoded rows to ``config.out``.
    """
    _ensure_dir(config.out)
    stats = ExportStats()
    query = build_query(config.contract, config.from_block, config.to_block)

    with open(config.out, "w", newline="", encoding="utf-8") as fh:
        csv.writer(fh, lineterminator="\n").writerow(CSV_HEADER)
        for page in client.stream_pages(query):
            pairs = (
                (tx, page.block_timestamp(to_int(tx.get("block_number"))))
                for tx in page.transactions
            )
            if not write_rows(fh, pairs, stats, config.limit):
                break

    logger.info(stats.summary(config.out, config.limit))
    return stats


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _ensure_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
