from __future__ import annotations

from ..constants import PLACEHOLDER_TOKEN_IMAGE, PRICE_DECIMALS
from ..domain import (
    AssetResult,
    NetworkConfig,
    NetworkResult,
    ReserveSnapshot,
    TokenListEntry,
    UserReserve,
)
from ..logger import get_logger
from ..units import apr_to_apy, normalize, ray_mul_scaled, ray_rate_to_apr

logger = get_logger(__name__)


def _index_reserves(reserves: list[ReserveSnapshot]) -> dict[str, ReserveSnapshot]:
    """Map lower-cased underlying asset address -> reserve (first wins)."""
    indexed: dict[str, ReserveSnapshot] = {}
    for reserve in reserves:
        indexed.setdefault(reserve.underlying_asset.lower(), reserve)
    return indexed


def price_position(
    user_reserve: UserReserve,
    reserve: ReserveSnapshot,
    token_metadata: dict[str, TokenListEntry],
) -> AssetResult:
    """Value a single supply position in USD and attach display metadata."""
    raw_balance = ray_mul_scaled(
        user_reserve.scaled_a_token_balance, reserve.liquidity_index
    )
    token_balance = normalize(raw_balance, reserve.decimals)
    price_in_usd = normalize(
        reserve.price_in_market_reference_currency, PRICE_DECIMALS
    )
    apr = ray_rate_to_apr(reserve.liquidity_rate)

    metadata = token_metadata.get(reserve.symbol.upper())
    if metadata is None:
        name, image_url = reserve.symbol, PLACEHOLDER_TOKEN_IMAGE
    else:
        name, image_url = metadata.name, metadata.image_url

    return AssetResult(
        underlying_asset=user_reserve.underlying_asset,
        symbol=reserve.symbol,
        name=name,
        token_balance=token_balance,
        price_in_usd=price_in_usd,
        balance_in_usd=token_balance * price_in_usd,
        liquidity_rate=apr_to_apy(apr),
        image_url=image_url,
    )


def build_asset_results(
    user_reserves: list[UserReserve],
    reserves: list[ReserveSnapshot],
    token_metadata: dict[str, TokenListEntry],
) -> list[AssetResult]:
    """Join user positions with reserve data.

    Args:
        user_reserves: Positions returned by the data provider
        reserves: Current market data for the same network
        token_metadata: Upper-cased symbol -> display metadata

    Returns:
        One AssetResult per position with a positive scaled balance and a
        matching reserve, in the order of ``user_reserves``.

    Positions without a matching reserve are logged and skipped.
    """
    reserves_by_asset = _index_reserves(reserves)
    results: list[AssetResult] = []

    for user_reserve in user_reserves:
        if user_reserve.scaled_a_token_balance <= 0:
            continue

        reserve = reserves_by_asset.get(user_reserve.underlying_asset.lower())
        if reserve is None:
            logger.info(
                "No reserve data found for %s, skipping",
                user_reserve.underlying_asset,
            )
            continue

        results.append(price_position(user_reserve, reserve, token_metadata))

    return results


def build_network_result(
    network_config: NetworkConfig, assets: list[AssetResult]
) -> NetworkResult | None:
    """Wrap priced assets into a NetworkResult, or None when there are none."""
    if not assets:
        return None

    return NetworkResult(
        network=network_config.network,
        network_name=network_config.display_name,
        network_image=network_config.image_url,
        assets=assets,
        total_balance_usd=sum(asset.balance_in_usd for asset in assets),
    )
