"""Application state container."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .clients.token_list import TokenListCache
from .settings import LiquidityRatesSettings


@dataclass
class AppState:
    """Container for application-wide state and dependencies.

    Passed through the pipeline to avoid global state and enable testing.
    """

    settings: LiquidityRatesSettings
    logger: logging.Logger
    token_lists: TokenListCache


def build_state(
    settings: LiquidityRatesSettings, logger: logging.Logger | None = None
) -> AppState:
    """Create the state for one process, including its token-list cache."""
    token_list_urls = {
        network: settings.network_config(network).token_list_url
        for network in settings.networks
    }
    token_lists = TokenListCache(
        token_list_urls,
        ttl_seconds=settings.token_list_ttl_seconds,
        timeout=settings.request_timeout,
    )
    return AppState(
        settings=settings,
        logger=logger or logging.getLogger("liquidity_rates"),
        token_lists=token_lists,
    )
