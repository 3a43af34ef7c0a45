from __future__ import annotations

from abc import ABC, abstractmethod

from ..domain import NetworkConfig, ReserveSnapshot, UserReserve


class BaseLendingAdapter(ABC):
    """Abstract base class for lending-protocol data readers."""

    def __init__(self, network_config: NetworkConfig):
        """Initialize the adapter for one network.

        Args:
            network_config: Endpoints and contract addresses of the network
        """
        self.network_config = network_config

    @property
    @abstractmethod
    def adapter_name(self) -> str:
        """Return the name of this adapter."""
        ...

    @abstractmethod
    async def fetch_user_reserves(self, user_address: str) -> list[UserReserve]:
        """Fetch the user's supply positions on this network."""
        ...

    @abstractmethod
    async def fetch_reserves(self) -> list[ReserveSnapshot]:
        """Fetch current market data for every reserve on this network."""
        ...
