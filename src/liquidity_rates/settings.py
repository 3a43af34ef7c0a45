"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)
from web3 import Web3

from .constants import (
    DEFAULT_NETWORKS,
    DEFAULT_WALLET_ADDRESS,
    NETWORK_DEFAULTS,
    TOKEN_LIST_TTL_SECONDS,
    Network,
)
from .domain import NetworkConfig

load_dotenv()


class LiquidityRatesSettings(BaseSettings):
    """Single source of truth for configuration. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with LIQUIDITY_RATES_)
    - Config file (TOML), lowest precedence

    Do not read os.environ or files elsewhere in the codebase.
    """

    # --- target ---
    wallet_address: str = Field(default=DEFAULT_WALLET_ADDRESS, validate_default=True)
    networks: list[Network] = Field(default_factory=lambda: list(DEFAULT_NETWORKS))

    # --- per-network overrides ---
    rpc_overrides: dict[Network, str] = Field(default_factory=dict)
    token_list_overrides: dict[Network, str] = Field(default_factory=dict)
    ui_pool_data_provider_overrides: dict[Network, str] = Field(default_factory=dict)

    # --- outbound calls ---
    token_list_ttl_seconds: float = Field(default=TOKEN_LIST_TTL_SECONDS, gt=0)
    request_timeout: float | None = Field(
        default=None,
        gt=0,
        description="Timeout (seconds) for RPC and token-list requests. Unset means no timeout.",
    )

    # --- server ---
    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="LIQUIDITY_RATES_",
        env_file=".env",
        extra="ignore",  # ignore unknown keys in env/config file
    )

    @field_validator("wallet_address")
    @classmethod
    def checksum_wallet(cls, v: str) -> str:
        if not Web3.is_address(v):
            raise ValueError(f"wallet_address is not a valid address: {v}")
        return Web3.to_checksum_address(v)

    @field_validator("networks")
    @classmethod
    def reject_duplicate_networks(cls, v: list[Network]) -> list[Network]:
        duplicates = sorted({n.value for n in v if v.count(n) > 1})
        if duplicates:
            raise ValueError(f"networks contains duplicates: {duplicates}")
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: CLI > ENV > FILE."""
        env_cfg = os.environ.get("LIQUIDITY_RATES_CONFIG")
        cfg_path = Path(env_cfg) if env_cfg else None

        class TomlConfigSource(PydanticBaseSettingsSource):
            def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
                super().__init__(settings_cls)
                self._path = path

            def get_field_value(
                self, field: Any, field_name: str
            ) -> tuple[Any, str, bool]:
                return None, "", False

            def __call__(self) -> dict[str, Any]:
                if not self._path:
                    # Try default locations
                    local_config = Path("liquidity-rates.toml")
                    user_config = (
                        Path.home() / ".config" / "liquidity-rates" / "config.toml"
                    )
                    if local_config.exists():
                        self._path = local_config
                    elif user_config.exists():
                        self._path = user_config
                    else:
                        return {}

                if not self._path.exists():
                    return {}

                with self._path.open("rb") as f:
                    data = tomllib.load(f)  # supports top-level or [liquidity_rates]
                body = data.get("liquidity_rates", data)
                if not isinstance(body, dict):
                    return {}
                return body

        return (
            init_settings,  # CLI (highest)
            env_settings,  # ENV
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
            file_secret_settings,  # optional secrets dir
        )

    def as_safe_dict(self) -> dict[str, Any]:
        """Return the config as a JSON-friendly dict."""
        return self.model_dump(mode="json")

    def network_config(self, network: Network | str) -> NetworkConfig:
        """Resolve the effective configuration for a network.

        Args:
            network: Network enum member or its string value

        Returns:
            NetworkConfig built from the static table plus any overrides

        Raises:
            ValueError: If the network is not known
        """
        try:
            key = Network(network)
        except ValueError:
            raise ValueError(
                f"Unknown network '{network}'. "
                f"Available: {', '.join(n.value for n in NETWORK_DEFAULTS)}"
            ) from None

        defaults = NETWORK_DEFAULTS[key]
        return NetworkConfig(
            network=key,
            rpc_url=self.rpc_overrides.get(key, defaults["rpc_url"]),
            token_list_url=self.token_list_overrides.get(
                key, defaults["token_list_url"]
            ),
            display_name=defaults["display_name"],
            image_url=defaults["image_url"],
            pool_addresses_provider=defaults["pool_addresses_provider"],
            ui_pool_data_provider=self.ui_pool_data_provider_overrides.get(
                key, defaults["ui_pool_data_provider"]
            ),
        )
