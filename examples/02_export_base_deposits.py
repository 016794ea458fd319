"""
Export the most recent Gas.zip deposits on Base to CSV.

Requires network access. Set HYPERSYNC_API_TOKEN if your endpoint needs it.
"""

import os

from gaszip_decoder.stream import (
    BASE_HYPERSYNC_URL,
    FetchConfig,
    HypersyncClient,
    export_transactions,
)

BLOCKS_BACK = 20_000


def main():
    token = os.getenv("HYPERSYNC_API_TOKEN")
    with HypersyncClient(BASE_HYPERSYNC_URL, api_token=token) as client:
        height = client.get_height()
        print(f"> Base archive height: {height}")

        config = FetchConfig(
            url=BASE_HYPERSYNC_URL,
            api_token=token,
            from_block=max(0, height - BLOCKS_BACK),
            out="data/recent-base.csv",
            limit=500,
        )
        stats = export_transactions(client, config)

    print(stats.summary(config.out, config.limit))


if __name__ == "__main__":
    main()
