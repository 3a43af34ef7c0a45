"""Domain models for the liquidity rates report."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import Network


@dataclass(frozen=True)
class NetworkConfig:
    """Effective endpoints and Aave V3 contracts for one network."""

    network: Network
    rpc_url: str
    token_list_url: str
    display_name: str
    image_url: str
    pool_addresses_provider: str
    ui_pool_data_provider: str


@dataclass(frozen=True)
class TokenListEntry:
    """Display metadata for a token, keyed by upper-cased symbol."""

    symbol: str
    name: str
    image_url: str | None


@dataclass(frozen=True)
class ReserveSnapshot:
    """Market data for one reserve as read from the data provider."""

    underlying_asset: str
    symbol: str
    decimals: int
    liquidity_index: int  # ray
    liquidity_rate: int  # ray
    price_in_market_reference_currency: int  # 8 decimals on v3 markets


@dataclass(frozen=True)
class UserReserve:
    """A user's supply position in one reserve."""

    underlying_asset: str
    scaled_a_token_balance: int


@dataclass
class AssetResult:
    underlying_asset: str
    symbol: str
    name: str
    token_balance: float
    price_in_usd: float
    balance_in_usd: float
    liquidity_rate: float  # APY, percent
    image_url: str | None

    def to_dict(self) -> dict[str, object]:
        return {
            "underlyingAsset": self.underlying_asset,
            "symbol": self.symbol,
            "name": self.name,
            "tokenBalance": self.token_balance,
            "priceInUSD": self.price_in_usd,
            "balanceInUSD": self.balance_in_usd,
            "liquidityRate": self.liquidity_rate,
            "image_url": self.image_url,
        }


@dataclass
class NetworkResult:
    network: Network
    network_name: str
    network_image: str
    assets: list[AssetResult] = field(default_factory=list)
    total_balance_usd: float = 0.0

    def to_dict(self) -> dict[str, object]:
        """Convert to the JSON shape served by the API."""
        return {
            "network": self.network.value,
            "networkName": self.network_name,
            "networkImage": self.network_image,
            "assets": [asset.to_dict() for asset in self.assets],
            "totalBalanceUSD": self.total_balance_usd,
        }
