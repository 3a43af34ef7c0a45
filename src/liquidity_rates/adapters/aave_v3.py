from __future__ import annotations

import asyncio
from typing import Any

from eth_typing import URI
from web3 import Web3

from ..abi import (
    load_ui_pool_data_provider_abi,
    output_component_names,
    struct_to_dict,
)
from ..domain import NetworkConfig, ReserveSnapshot, UserReserve
from ..logger import get_logger
from .base import BaseLendingAdapter

logger = get_logger(__name__)


class AaveV3Adapter(BaseLendingAdapter):
    """Reads Aave V3 positions and reserves through the UiPoolDataProvider.

    Both reads are point-in-time calls against the latest block of the
    network's RPC endpoint.
    """

    def __init__(
        self,
        network_config: NetworkConfig,
        *,
        timeout: float | None = None,
        w3: Web3 | None = None,
    ):
        super().__init__(network_config)

        if w3 is None:
            request_kwargs = {"timeout": timeout} if timeout is not None else {}
            w3 = Web3(
                Web3.HTTPProvider(
                    URI(network_config.rpc_url), request_kwargs=request_kwargs
                )
            )
        self.w3 = w3

        abi = load_ui_pool_data_provider_abi()
        self._reserve_fields = output_component_names(abi, "getReservesData")
        self._user_reserve_fields = output_component_names(abi, "getUserReservesData")
        self.ui_pool_data_provider = self.w3.eth.contract(
            address=Web3.to_checksum_address(network_config.ui_pool_data_provider),
            abi=abi,
        )
        self.pool_addresses_provider = Web3.to_checksum_address(
            network_config.pool_addresses_provider
        )

    @property
    def adapter_name(self) -> str:
        return "aave_v3"

    async def fetch_user_reserves(self, user_address: str) -> list[UserReserve]:
        """Fetch the user's reserves from ``getUserReservesData``.

        Args:
            user_address: Wallet to query

        Returns:
            One UserReserve per listed reserve, including zero balances.
        """
        user = Web3.to_checksum_address(user_address)
        logger.debug(
            "Fetching user reserves for %s on %s",
            user,
            self.network_config.network.value,
        )
        raw_reserves, _emode_category = await asyncio.to_thread(
            self.ui_pool_data_provider.functions.getUserReservesData(
                self.pool_addresses_provider, user
            ).call
        )
        return [self._to_user_reserve(raw) for raw in raw_reserves]

    async def fetch_reserves(self) -> list[ReserveSnapshot]:
        """Fetch market data for every reserve from ``getReservesData``."""
        logger.debug(
            "Fetching reserves data on %s", self.network_config.network.value
        )
        raw_reserves, _base_currency = await asyncio.to_thread(
            self.ui_pool_data_provider.functions.getReservesData(
                self.pool_addresses_provider
            ).call
        )
        return [self._to_reserve_snapshot(raw) for raw in raw_reserves]

    def _to_user_reserve(self, raw: Any) -> UserReserve:
        data = struct_to_dict(raw, self._user_reserve_fields)
        return UserReserve(
            underlying_asset=data["underlyingAsset"],
            scaled_a_token_balance=int(data["scaledATokenBalance"]),
        )

    def _to_reserve_snapshot(self, raw: Any) -> ReserveSnapshot:
        data = struct_to_dict(raw, self._reserve_fields)
        return ReserveSnapshot(
            underlying_asset=data["underlyingAsset"],
            symbol=data["symbol"],
            decimals=int(data["decimals"]),
            liquidity_index=int(data["liquidityIndex"]),
            liquidity_rate=int(data["liquidityRate"]),
            price_in_market_reference_currency=int(
                data["priceInMarketReferenceCurrency"]
            ),
        )
