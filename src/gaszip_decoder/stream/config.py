"""
Configuration for fetching and exporting Gas.zip deposits.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

# Gas.zip deposit contract (same address on every EVM chain it supports)
GASZIP_DEPOSIT_CONTRACT = "0x391E7C679d29bD940d63be94AD22A25d25b5A604"

BASE_HYPERSYNC_URL = "https://base.hypersync.xyz"
DEFAULT_OUTPUT = "data/decoded.csv"
BASE_DEFAULT_OUTPUT = "data/decoded-base.csv"


class ConfigError(ValueError):
    """Raised for missing or inconsistent fetch settings."""
    pass


@dataclass
class FetchConfig:
    """
    Settings for one fetch-and-export run.

    Args:
        url:        HyperSync endpoint for the chain, e.g. https://base.hypersync.xyz
        api_token:  HyperSync bearer token (optional on public endpoints)
        contract:   deposit contract whose incoming transactions are exported
        from_block: first block to scan
        to_block:   exclusive upper bound; None (or 0) streams to the chain tip
        out:        CSV output path
        limit:      stop after this many transactions
        timeout:    HTTP timeout in seconds
    """
    url: str | None = None
    api_token: str | None = None
    contract: str = GASZIP_DEPOSIT_CONTRACT
    from_block: int = 0
    to_block: int | None = None
    out: str = DEFAULT_OUTPUT
    limit: int | None = None
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.to_block == 0:
            self.to_block = None
        self.contract = self.contract.lower()

    @classmethod
    def from_env(cls, **overrides: object) -> FetchConfig:
        """
        Build a config from HYPERSYNC_URL / HYPERSYNC_API_TOKEN
        (HYPERSYNC_BEARER_TOKEN is accepted as a token fallback).
        Keyword overrides that are not None win over the environment.
        """
        cfg = cls(
            url=os.getenv("HYPERSYNC_URL"),
            api_token=os.getenv("HYPERSYNC_API_TOKEN") or os.getenv("HYPERSYNC_BEARER_TOKEN"),
        )
        values = {k: v for k, v in overrides.items() if v is not None}
        return replace(cfg, **values) if values else cfg

    def validate(self) -> None:
        """Raise ConfigError if the settings cannot produce a valid query."""
        if not self.url:
            raise ConfigError("Missing HyperSync URL. Provide --url or HYPERSYNC_URL env var")
        if self.from_block < 0:
            raise ConfigError(f"from_block must be >= 0, got {self.from_block}")
        if self.to_block is not None and self.to_block <= self.from_block:
            raise ConfigError(
                f"to_block ({self.to_block}) must be greater than from_block ({self.from_block})"
            )
        if self.limit is not None and self.limit < 0:
            raise ConfigError(f"limit must be >= 0, got {self.limit}")
