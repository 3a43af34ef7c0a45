"""Token-list client with a per-network time-based cache.

Token lists follow the Uniswap token-list format: either an object with a
``tokens`` array or a bare array of ``{symbol, name, logoURI}`` entries.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Callable

import requests

from ..constants import TOKEN_LIST_TTL_SECONDS, Network
from ..domain import TokenListEntry
from ..logger import get_logger

logger = get_logger(__name__)

TokenMetadata = dict[str, TokenListEntry]


@dataclass
class _CacheEntry:
    data: TokenMetadata
    fetched_at: float


def parse_token_list(document: Any) -> TokenMetadata:
    """Build a symbol-keyed map from a token-list document.

    Symbols are upper-cased. Later entries replace earlier ones with the same
    symbol. Entries without a string symbol are skipped.

    Raises:
        ValueError: If the document is neither a list nor an object with a
            ``tokens`` list.
    """
    tokens = document.get("tokens") if isinstance(document, dict) else document
    if not isinstance(tokens, list):
        raise ValueError("Token list document has no 'tokens' array")

    token_map: TokenMetadata = {}
    for token in tokens:
        if not isinstance(token, dict):
            continue
        symbol = token.get("symbol")
        if not isinstance(symbol, str) or not symbol:
            continue
        token_map[symbol.upper()] = TokenListEntry(
            symbol=symbol,
            name=token.get("name") or symbol,
            image_url=token.get("logoURI"),
        )
    return token_map


class TokenListCache:
    """Fetches and memoizes token metadata per network.

    A cached map is served until it is older than ``ttl_seconds``. Fetch or
    parse failures return an empty map and are not cached.
    """

    def __init__(
        self,
        urls: dict[Network, str],
        *,
        ttl_seconds: float = TOKEN_LIST_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        timeout: float | None = None,
    ):
        self._urls = dict(urls)
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._timeout = timeout
        self._entries: dict[Network, _CacheEntry] = {}

    def clear(self) -> None:
        self._entries.clear()

    async def _fetch_document(self, url: str) -> Any:
        response = await asyncio.to_thread(requests.get, url, timeout=self._timeout)
        response.raise_for_status()
        return response.json()

    async def get_token_metadata(self, network: Network) -> TokenMetadata:
        """Return the symbol -> TokenListEntry map for a network.

        Args:
            network: Network whose token list should be used

        Returns:
            Cached or freshly fetched metadata; empty when the list could not
            be fetched or parsed.
        """
        cached = self._entries.get(network)
        if cached is not None and self._clock() - cached.fetched_at < self._ttl_seconds:
            return cached.data

        try:
            url = self._urls[network]
            logger.debug("Fetching token list for %s from %s", network.value, url)
            document = await self._fetch_document(url)
            token_map = parse_token_list(document)
        except (
            requests.exceptions.RequestException,
            ValueError,
            KeyError,
            TypeError,
        ) as e:
            # JSONDecodeError is a ValueError subclass
            logger.warning(
                "Could not fetch token list for %s, using empty list: %s",
                network.value,
                e,
            )
            return {}

        self._entries[network] = _CacheEntry(data=token_map, fetched_at=self._clock())
        logger.debug("Cached %d tokens for %s", len(token_map), network.value)
        return token_map
