"""Per-network position collection."""

from __future__ import annotations

from ..adapters import AaveV3Adapter
from ..constants import Network
from ..domain import NetworkResult
from ..processors import build_asset_results, build_network_result
from ..state import AppState


async def fetch_network(state: AppState, network: Network) -> NetworkResult | None:
    """Collect the configured wallet's Aave V3 deposits on one network.

    Args:
        state: Application state containing settings, logger and token lists
        network: Network to query

    Returns:
        NetworkResult with at least one asset, or None when the wallet has no
        qualifying deposits or any step failed.
    """
    s = state.settings
    log = state.logger

    try:
        network_config = s.network_config(network)
        adapter = AaveV3Adapter(network_config, timeout=s.request_timeout)

        user_reserves = await adapter.fetch_user_reserves(s.wallet_address)
        reserves = await adapter.fetch_reserves()
        token_metadata = await state.token_lists.get_token_metadata(
            network_config.network
        )

        assets = build_asset_results(user_reserves, reserves, token_metadata)
        result = build_network_result(network_config, assets)
    except Exception:
        log.exception("Error fetching contract data for %s", network.value)
        return None

    log.debug(
        "%s: %d user reserves, %d priced assets",
        network.value,
        len(user_reserves),
        len(assets),
    )
    return result
