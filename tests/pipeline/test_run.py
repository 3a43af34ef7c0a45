from __future__ import annotations

import logging
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from liquidity_rates.constants import DEFAULT_NETWORKS, Network
from liquidity_rates.domain import NetworkResult
from liquidity_rates.pipeline.run import collect_liquidity_rates
from liquidity_rates.settings import LiquidityRatesSettings
from liquidity_rates.state import AppState


def _state(networks=None) -> AppState:
    kwargs = {} if networks is None else {"networks": networks}
    return AppState(
        settings=LiquidityRatesSettings(**kwargs),
        logger=logging.getLogger("test"),
        token_lists=MagicMock(),
    )


def _result(network: Network) -> NetworkResult:
    return NetworkResult(
        network=network,
        network_name=network.value.title(),
        network_image="https://img.example/chain.png",
        assets=[],
        total_balance_usd=1.0,
    )


@pytest.mark.asyncio
async def test_networks_are_queried_sequentially_in_config_order():
    state = _state()
    calls: list[Network] = []

    async def _fake_fetch(_state, network):
        calls.append(network)
        return _result(network)

    with patch("liquidity_rates.pipeline.run.fetch_network", side_effect=_fake_fetch):
        results = await collect_liquidity_rates(state)

    assert calls == DEFAULT_NETWORKS
    assert [r.network for r in results] == DEFAULT_NETWORKS


@pytest.mark.asyncio
async def test_empty_networks_are_omitted_and_order_preserved():
    state = _state(["base", "ethereum", "optimism"])

    async def _fake_fetch(_state, network):
        return None if network is Network.ETHEREUM else _result(network)

    with patch("liquidity_rates.pipeline.run.fetch_network", side_effect=_fake_fetch):
        results = await collect_liquidity_rates(state)

    assert [r.network for r in results] == [Network.BASE, Network.OPTIMISM]


@pytest.mark.asyncio
async def test_all_networks_failing_yields_empty_list():
    state = _state()

    with patch(
        "liquidity_rates.pipeline.run.fetch_network",
        new_callable=AsyncMock,
        return_value=None,
    ) as mock_fetch:
        results = await collect_liquidity_rates(state)

    assert results == []
    assert mock_fetch.await_count == len(DEFAULT_NETWORKS)
