"""
Command-line entry points.

    gaszip-decode 0x0200...                 print one decoded calldata as JSON
    gaszip-fetch --url https://<chain>.hypersync.xyz --out data/out.csv
    gaszip-fetch-base --from 0 --to 0       Base preset (to=0 means latest)
"""

from __future__ import annotations

import argparse
import logging
import sys

from gaszip_decoder.core.decoder import decode_calldata
from gaszip_decoder.core.errors import DecodeError
from gaszip_decoder.stream.config import (
    BASE_DEFAULT_OUTPUT,
    BASE_HYPERSYNC_URL,
    DEFAULT_OUTPUT,
    GASZIP_DEPOSIT_CONTRACT,
    ConfigError,
    FetchConfig,
)
from gaszip_decoder.stream.export import export_transactions
from gaszip_decoder.stream.hypersync import HypersyncClient, HypersyncError


def main_decode(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="gaszip-decode",
        description="Decode Gas.zip deposit calldata and print it as JSON.",
    )
    parser.add_argument("calldata", nargs="?", help="0x-prefixed calldata hex")
    args = parser.parse_args(argv)

    if not args.calldata:
        print("Usage: gaszip-decode <0x-calldata>", file=sys.stderr)
        return 1

    try:
        decoded = decode_calldata(args.calldata)
    except DecodeError as e:
        print(f"Decode error: {e}", file=sys.stderr)
        return 2

    print(decoded.model_dump_json(indent=2))
    return 0


def _fetch_parser(prog: str, default_out: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Stream Gas.zip deposit transactions from HyperSync and write decoded rows to CSV.",
    )
    parser.add_argument("--url", help="HyperSync endpoint (default: $HYPERSYNC_URL)")
    parser.add_argument("--from", dest="from_block", type=int, default=None, help="first block (default 0)")
    parser.add_argument("--to", dest="to_block", type=int, default=None, help="end block, 0 = latest")
    parser.add_argument("--out", default=default_out, help=f"CSV output path (default {default_out})")
    parser.add_argument("--addr", dest="contract", default=GASZIP_DEPOSIT_CONTRACT, help="deposit contract")
    parser.add_argument("--api-token", dest="api_token", help="HyperSync bearer token")
    # backwards compatible alias
    parser.add_argument("--token", dest="api_token", help=argparse.SUPPRESS)
    parser.add_argument("--limit", type=int, default=None, help="stop after N transactions")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser


def _run_fetch(args: argparse.Namespace, default_url: str | None = None) -> int:
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = FetchConfig.from_env(
        url=args.url or default_url,
        api_token=args.api_token,
        contract=args.contract,
        from_block=args.from_block,
        to_block=args.to_block,
        out=args.out,
        limit=args.limit,
    )

    try:
        config.validate()
        with HypersyncClient(config.url, api_token=config.api_token, timeout=config.timeout) as client:
            stats = export_transactions(client, config)
    except (ConfigError, HypersyncError, OSError) as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    print(stats.summary(config.out, config.limit))
    return 0


def main_fetch(argv: list[str] | None = None) -> int:
    args = _fetch_parser("gaszip-fetch", DEFAULT_OUTPUT).parse_args(argv)
    return _run_fetch(args)


def main_fetch_base(argv: list[str] | None = None) -> int:
    args = _fetch_parser("gaszip-fetch-base", BASE_DEFAULT_OUTPUT).parse_args(argv)
    return _run_fetch(args, default_url=BASE_HYPERSYNC_URL)


if __name__ == "__main__":
    sys.exit(main_decode())
