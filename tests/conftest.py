from __future__ import annotations

import pytest

from liquidity_rates.constants import NETWORK_DEFAULTS, Network
from liquidity_rates.domain import NetworkConfig, ReserveSnapshot, UserReserve

USDC = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
RAY = 10**27


@pytest.fixture
def ethereum_config() -> NetworkConfig:
    defaults = NETWORK_DEFAULTS[Network.ETHEREUM]
    return NetworkConfig(network=Network.ETHEREUM, **defaults)


@pytest.fixture
def usdc_reserve() -> ReserveSnapshot:
    return ReserveSnapshot(
        underlying_asset=USDC,
        symbol="USDC",
        decimals=6,
        liquidity_index=105 * 10**25,  # 1.05 ray
        liquidity_rate=3 * 10**25,  # 3% APR
        price_in_market_reference_currency=100_000_000,  # $1.00
    )


@pytest.fixture
def weth_reserve() -> ReserveSnapshot:
    return ReserveSnapshot(
        underlying_asset=WETH,
        symbol="WETH",
        decimals=18,
        liquidity_index=RAY,
        liquidity_rate=2 * 10**25,
        price_in_market_reference_currency=3_000 * 10**8,
    )


@pytest.fixture
def usdc_position() -> UserReserve:
    return UserReserve(underlying_asset=USDC.lower(), scaled_a_token_balance=1_000_000_000)
