"""Per-network endpoints, Aave V3 contract addresses and display metadata."""

from enum import Enum
from typing import TypedDict


class Network(str, Enum):
    ETHEREUM = "ethereum"
    POLYGON = "polygon"
    AVALANCHE = "avalanche"
    BASE = "base"
    ARBITRUM = "arbitrum"
    OPTIMISM = "optimism"


class NetworkDefaults(TypedDict):
    rpc_url: str
    token_list_url: str
    display_name: str
    image_url: str
    pool_addresses_provider: str
    ui_pool_data_provider: str


DEFAULT_WALLET_ADDRESS = "0x640dcF8E66e06723f565C637a1a09aCca45e65fc"

RAY = 10**27
PRICE_DECIMALS = 8
DAYS_PER_YEAR = 365

TOKEN_LIST_TTL_SECONDS = 24 * 60 * 60

PLACEHOLDER_TOKEN_IMAGE = (
    "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/"
    "ethereum/assets/0x0000000000000000000000000000000000000000/logo.png"
)

_TRUSTWALLET_CHAIN_LOGO = (
    "https://raw.githubusercontent.com/trustwallet/assets/master/blockchains/{}/info/logo.png"
)

# Iteration order of this table is the order networks appear in responses.
NETWORK_DEFAULTS: dict[Network, NetworkDefaults] = {
    Network.ETHEREUM: {
        "rpc_url": "https://eth-mainnet.public.blastapi.io",
        "token_list_url": "https://gateway.ipfs.io/ipns/tokens.uniswap.org",
        "display_name": "Ethereum",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("ethereum"),
        "pool_addresses_provider": "0x2f39d218133AFaB8F2B819B1066c7E434Ad94E9e",
        "ui_pool_data_provider": "0x3F78BBD206e4D3c504Eb854232EdA7e47E9Fd8FC",
    },
    Network.POLYGON: {
        "rpc_url": "https://polygon-mainnet.public.blastapi.io",
        "token_list_url": "https://unpkg.com/quickswap-default-token-list@1.3.27/build/quickswap-default.tokenlist.json",
        "display_name": "Polygon",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("polygon"),
        "pool_addresses_provider": "0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
        "ui_pool_data_provider": "0x68100bD5345eA474D93577127C11F39FF8463e93",
    },
    Network.AVALANCHE: {
        "rpc_url": "https://ava-mainnet.public.blastapi.io/ext/bc/C/rpc",
        "token_list_url": "https://raw.githubusercontent.com/traderjoe-xyz/joe-tokenlists/main/joe.tokenlist.json",
        "display_name": "Avalanche",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("avalanchec"),
        "pool_addresses_provider": "0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
        "ui_pool_data_provider": "0x50B4a66bF4D41e6252540eA7427D7A933Bc3c088",
    },
    Network.BASE: {
        "rpc_url": "https://base-mainnet.public.blastapi.io",
        "token_list_url": "https://raw.githubusercontent.com/ethereum-optimism/ethereum-optimism.github.io/master/optimism.tokenlist.json",
        "display_name": "Base",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("base"),
        "pool_addresses_provider": "0xe20fCBdBfFC4Dd138cE8b2E6FBb6CB49777ad64D",
        "ui_pool_data_provider": "0x68100bD5345eA474D93577127C11F39FF8463e93",
    },
    Network.ARBITRUM: {
        "rpc_url": "https://arbitrum-one.public.blastapi.io",
        "token_list_url": "https://tokenlist.arbitrum.io/ArbTokenLists/arbed_arb_whitelist_era.json",
        "display_name": "Arbitrum",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("arbitrum"),
        "pool_addresses_provider": "0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
        "ui_pool_data_provider": "0x5c5228aC8BC1528482514aF3e27E692495148717",
    },
    Network.OPTIMISM: {
        "rpc_url": "https://optimism-mainnet.public.blastapi.io",
        "token_list_url": "https://static.optimism.io/optimism.tokenlist.json",
        "display_name": "Optimism",
        "image_url": _TRUSTWALLET_CHAIN_LOGO.format("optimism"),
        "pool_addresses_provider": "0xa97684ead0e402dC232d5A977953DF7ECBaB3CDb",
        "ui_pool_data_provider": "0xE92cd6164CE7DC68e740765BC1f2a091B6CBc3e4",
    },
}

DEFAULT_NETWORKS: list[Network] = list(NETWORK_DEFAULTS)
