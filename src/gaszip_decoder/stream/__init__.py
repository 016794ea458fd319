"""stream module init"""
from gaszip_decoder.stream.config import (
    BASE_HYPERSYNC_URL,
    GASZIP_DEPOSIT_CONTRACT,
    ConfigError,
    FetchConfig,
)
from gaszip_decoder.stream.export import (
    CSV_HEADER,
    ExportStats,
    build_row,
    export_transactions,
    format_eth,
)
from gaszip_decoder.stream.hypersync import (
    HypersyncClient,
    HypersyncError,
    QueryPage,
    build_query,
)

__all__ = [
    "BASE_HYPERSYNC_URL",
    "CSV_HEADER",
    "ConfigError",
    "ExportStats",
    "FetchConfig",
    "GASZIP_DEPOSIT_CONTRACT",
    "HypersyncClient",
    "HypersyncError",
    "QueryPage",
    "build_query",
    "build_row",
    "export_transactions",
    "format_eth",
]
