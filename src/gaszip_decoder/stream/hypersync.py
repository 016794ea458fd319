"""
HypersyncClient: minimal HTTP client for the Envio HyperSync query API.

Only what the exporter needs is implemented: a transaction query filtered
by recipient contract, paged forward with the server's ``next_block``
cursor.

Docs: https://docs.envio.dev/docs/HyperSync/hypersync-query
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger("gaszip_decoder.hypersync")

BLOCK_FIELDS = ["number", "timestamp"]
TRANSACTION_FIELDS = [
    "block_number",
    "transaction_index",
    "hash",
    "from",
    "to",
    "input",
    "value",
]


class HypersyncError(Exception):
    """Raised when the HyperSync API returns an error."""
    pass


@dataclass
class QueryPage:
    """One response page: transactions plus the blocks that contain them."""
    transactions: list[dict[str, Any]] = field(default_factory=list)
    blocks: dict[int, dict[str, Any]] = field(default_factory=dict)
    next_block: int | None = None
    archive_height: int | None = None

    def block_timestamp(self, block_number: int | None) -> Any:
        if block_number is None:
            return None
        block = self.blocks.get(block_number)
        return block.get("timestamp") if block else None


def to_int(value: Any) -> int | None:
    """Parse an int, decimal string or 0x-hex quantity. None/'' give None."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError(f"Not a quantity: {value!r}")
    if isinstance(value, int):
        return value
    text = str(value)
    if text.startswith(("0x", "0X")):
        return int(text, 16)
    return int(text)


def build_query(
    contract: str,
    from_block: int = 0,
    to_block: int | None = None,
) -> dict[str, Any]:
    """Query for every transaction sent to ``contract`` in [from_block, to_block)."""
    query: dict[str, Any] = {
        "from_block": from_block,
        "transactions": [{"to": [contract.lower()]}],
        "field_selection": {
            "block": list(BLOCK_FIELDS),
            "transaction": list(TRANSACTION_FIELDS),
        },
    }
    if to_block:
        query["to_block"] = to_block
    return query


class HypersyncClient:
    """
    Synchronous HyperSync client.

    Usage:
        with HypersyncClient("https://base.hypersync.xyz", api_token="...") as client:
            for page in client.stream_pages(build_query(contract)):
                ...
    """

    def __init__(
        self,
        url: str,
        api_token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.url = url.rstrip("/")
        headers: dict[str, str] = {"Content-Type": "application/json"}
        if api_token:
            headers["Authorization"] = f"Bearer {api_token}"
        self._client = httpx.Client(headers=headers, timeout=timeout, transport=transport)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_height(self) -> int:
        """Return the archive height of the HyperSync endpoint."""
        data = self._request("GET", "/height")
        try:
            return int(data["height"])
        except (KeyError, TypeError, ValueError) as e:
            raise HypersyncError(f"Unexpected /height response: {data!r}") from e

    def query(self, query: dict[str, Any]) -> QueryPage:
        """Run one query and return the parsed page."""
        return self._parse_page(self._post("/query", query))

    def stream_pages(self, query: dict[str, Any]) -> Iterator[QueryPage]:
        """
        Yield pages until the requested range is exhausted.

        ``from_block`` is advanced to each page's ``next_block``. The stream
        ends when ``next_block`` reaches ``to_block``, or the archive height
        when no ``to_block`` is set, or when the cursor stops moving.
        """
        current = dict(query)
        to_block = current.get("to_block")

        while True:
            page = self.query(current)
            yield page

            from_block = current.get("from_block", 0)
            next_block = page.next_block
            if next_block is None or next_block <= from_block:
                break
            if to_block is not None and next_block >= to_block:
                break
            if to_block is None and page.archive_height is not None and next_block >= page.archive_height:
                break

            logger.info(f"Fetched blocks {from_block}..{next_block}, advancing")
            current["from_block"] = next_block

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _post(self, path: str, payload: dict[str, Any]) -> Any:
        return self._request("POST", path, json=payload)

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        url = f"{self.url}{path}"
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise HypersyncError(f"Request to {url} failed: {e}") from e
        if response.status_code != 200:
            raise HypersyncError(f"API error {response.status_code} for {url}: {response.text}")
        try:
            return response.json()
        except ValueError as e:
            raise HypersyncError(f"Invalid JSON from {url}: {response.text[:200]}") from e

    def _parse_page(self, data: Any) -> QueryPage:
        if not isinstance(data, dict):
            raise HypersyncError(f"Unexpected /query response: {data!r}")
        # "data" is a list of batches; older servers return a single object
        batches = data.get("data") or []
        if isinstance(batches, dict):
            batches = [batches]

        page = QueryPage(
            next_block=to_int(data.get("next_block")),
            archive_height=to_int(data.get("archive_height")),
        )
        for batch in batches:
            for block in batch.get("blocks") or []:
                number = to_int(block.get("number"))
                if number is not None:
                    page.blocks[number] = block
            page.transactions.extend(batch.get("transactions") or [])
        return page

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> HypersyncClient:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()
