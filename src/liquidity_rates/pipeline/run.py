"""High-level aggregation across networks."""

from __future__ import annotations

from ..domain import NetworkResult
from ..state import AppState
from .network import fetch_network


async def collect_liquidity_rates(state: AppState) -> list[NetworkResult]:
    """Run one aggregation pass over every configured network.

    Networks are queried one after the other, in configuration order, so
    public RPC endpoints see at most one request from this process at a time.
    Networks that fail or hold no deposits are left out.

    Args:
        state: Application state containing settings and logger

    Returns:
        Non-empty network results, ordered as ``settings.networks``.
    """
    log = state.logger
    networks = state.settings.networks

    log.info("Collecting liquidity rates across %d networks", len(networks))

    results: list[NetworkResult] = []
    for network in networks:
        result = await fetch_network(state, network)
        if result is not None:
            results.append(result)

    log.info(
        "Collected positions on %d of %d networks", len(results), len(networks)
    )
    return results
